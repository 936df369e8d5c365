import logging
from .config import server

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def get_logger(name: str = 'games_api') -> logging.Logger:
    """Return the shared service logger, attaching a stream handler on first use"""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(server.log_level.upper())
        logger.propagate = False
    return logger
