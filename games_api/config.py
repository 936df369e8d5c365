from pydantic_settings import BaseSettings, SettingsConfigDict
import os

class DatabaseConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='POSTGRES_')

    HOST: str = os.getenv('POSTGRES_HOST', 'localhost')
    PORT: int = int(os.getenv('POSTGRES_PORT', 5432))
    DATABASE: str = os.getenv('POSTGRES_DB', 'games')
    USER: str = os.getenv('POSTGRES_USER', 'postgres')
    PASSWORD: str = os.getenv('POSTGRES_PASSWORD', 'postgres')
    MIN_POOL_SIZE: int = int(os.getenv('POSTGRES_MIN_POOL_SIZE', 5))
    MAX_POOL_SIZE: int = int(os.getenv('POSTGRES_MAX_POOL_SIZE', 20))
    COMMAND_TIMEOUT: float = float(os.getenv('POSTGRES_COMMAND_TIMEOUT', 10))

database = DatabaseConfig()

class StorageConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='STORAGE_')

    # 'postgres' or 'memory'
    backend: str = os.getenv('STORAGE_BACKEND', 'postgres')

storage = StorageConfig()

class AuthConfig(BaseSettings):
    JWT_SECRET: str = os.getenv('JWT_SECRET', 'change-me-games-api-development-secret')
    JWT_ALGORITHM: str = os.getenv('JWT_ALGORITHM', 'HS256')
    ROLE_CLAIM: str = os.getenv('JWT_ROLE_CLAIM', 'type')
    ADMIN_ROLE: str = os.getenv('JWT_ADMIN_ROLE', 'admin')
    # 'authenticated' lets any logged-in caller edit a game, 'admin' restricts it
    EDIT_POLICY: str = os.getenv('GAMES_EDIT_POLICY', 'authenticated')
    PUBLIC_TYPE_LISTING: bool = os.getenv('GAMES_PUBLIC_TYPE_LISTING', 'false').lower() in ('1', 'true', 'yes')

auth = AuthConfig()

class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='API_')

    host: str = os.getenv('API_HOST', '0.0.0.0')
    port: int = int(os.getenv('API_PORT', 8000))
    workers: int = int(os.getenv('API_WORKERS', 4))
    log_level: str = os.getenv('LOG_LEVEL', 'INFO')

server = ServerConfig()
