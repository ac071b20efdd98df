"""Configuration management using environment variables.

This module provides centralized configuration management using python-decouple
to read from .env files and environment variables.
"""

from decouple import config
from typing import List


def _csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    """Base configuration class."""

    # Database
    DB_DRIVER: str = config('DB_DRIVER', default='postgresql+psycopg2')
    DB_HOST: str = config('DB_HOST', default='localhost')
    DB_PORT: str = config('DB_PORT', default='5432')
    DB_USER: str = config('DB_USER', default='postgres')
    DB_PASSWORD: str = config('DB_PASSWORD', default='')
    DB_NAME: str = config('DB_NAME', default='temfy')
    # A full URL takes precedence over the DB_* parts when set
    DATABASE_URL_OVERRIDE: str = config('DATABASE_URL', default='')

    # Connection pool: small idle pool, larger ceiling of open connections
    DB_POOL_SIZE: int = config('DB_POOL_SIZE', default=10, cast=int)
    DB_MAX_OPEN: int = config('DB_MAX_OPEN', default=100, cast=int)

    # Cache
    REDIS_ENABLED: bool = config('REDIS_ENABLED', default=True, cast=bool)
    REDIS_HOST: str = config('REDIS_HOST', default='localhost')
    REDIS_PORT: str = config('REDIS_PORT', default='6379')
    REDIS_PASSWORD: str = config('REDIS_PASSWORD', default='')
    REDIS_DB: int = config('REDIS_DB', default=0, cast=int)

    # Server
    SERVER_HOST: str = config('SERVER_HOST', default='0.0.0.0')
    SERVER_PORT: int = config('SERVER_PORT', default=3000, cast=int)
    API_PREFIX: str = config('API_PREFIX', default='/api/v1')

    # Environment
    DEBUG: bool = config('DEBUG', default=False, cast=bool)
    ENVIRONMENT: str = config('ENVIRONMENT', default='development')

    # Security
    CORS_ORIGINS: List[str] = config('CORS_ORIGINS', default='*', cast=_csv)

    # Logging
    LOG_LEVEL: str = config('LOG_LEVEL', default='INFO')

    @property
    def DATABASE_URL(self) -> str:
        """SQLAlchemy URL, either the explicit override or composed from DB_* parts."""
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        credentials = self.DB_USER
        if self.DB_PASSWORD:
            credentials = f"{self.DB_USER}:{self.DB_PASSWORD}"
        return (
            f"{self.DB_DRIVER}://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def REDIS_URL(self) -> str:
        """redis-py connection URL built from the REDIS_* parts."""
        auth = f":{self.REDIS_PASSWORD}@" if self.REDIS_PASSWORD else ""
        return f"redis://{auth}{self.REDIS_HOST}:{self.REDIS_PORT}/{self.REDIS_DB}"

    @property
    def is_postgresql(self) -> bool:
        """Check if using PostgreSQL database."""
        return self.DATABASE_URL.startswith('postgresql')

    @property
    def is_sqlite(self) -> bool:
        """Check if using SQLite database."""
        return self.DATABASE_URL.startswith('sqlite')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    LOG_LEVEL = 'WARNING'


class TestingConfig(Config):
    """Testing configuration."""
    DATABASE_URL_OVERRIDE = 'sqlite:///test.db'
    REDIS_ENABLED = False
    DEBUG = True


def get_config() -> Config:
    """Get configuration based on environment."""
    env = config('ENVIRONMENT', default='development')

    if env == 'production':
        return ProductionConfig()
    elif env == 'testing':
        return TestingConfig()
    else:
        return DevelopmentConfig()


# Global config instance
settings = get_config()
