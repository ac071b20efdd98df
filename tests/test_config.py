from temfy.config import Config, ProductionConfig, TestingConfig


def test_database_url_composed_from_parts():
    cfg = Config()
    cfg.DATABASE_URL_OVERRIDE = ""
    cfg.DB_DRIVER = "postgresql+psycopg2"
    cfg.DB_USER = "app"
    cfg.DB_PASSWORD = "pw"
    cfg.DB_HOST = "db"
    cfg.DB_PORT = "5433"
    cfg.DB_NAME = "users"

    assert cfg.DATABASE_URL == "postgresql+psycopg2://app:pw@db:5433/users"
    assert cfg.is_postgresql
    assert not cfg.is_sqlite


def test_database_url_override_wins():
    cfg = Config()
    cfg.DATABASE_URL_OVERRIDE = "sqlite:///local.db"

    assert cfg.DATABASE_URL == "sqlite:///local.db"
    assert cfg.is_sqlite


def test_redis_url_includes_password_only_when_set():
    cfg = Config()
    cfg.REDIS_HOST = "cache"
    cfg.REDIS_PORT = "6380"
    cfg.REDIS_DB = 2
    cfg.REDIS_PASSWORD = ""
    assert cfg.REDIS_URL == "redis://cache:6380/2"

    cfg.REDIS_PASSWORD = "s3cret"
    assert cfg.REDIS_URL == "redis://:s3cret@cache:6380/2"


def test_environment_specific_overrides():
    assert TestingConfig().REDIS_ENABLED is False
    assert TestingConfig().is_sqlite
    assert ProductionConfig().DEBUG is False
    assert ProductionConfig().LOG_LEVEL == "WARNING"
