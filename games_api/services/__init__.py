from .games import GameService

__all__ = ["GameService"]
