import logging

from flask import Flask

from .cache import RedisCache
from .config import settings
from .database import Database, build_engine
from .security.config import init_security

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Set the root log format and level once per process."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())


def create_app(test_config=None):
    app = Flask(__name__)

    # Load configuration from settings
    app.config.from_mapping(
        DEBUG=settings.DEBUG,
        DATABASE_URL=settings.DATABASE_URL,
        API_PREFIX=settings.API_PREFIX,
        CORS_ORIGINS=settings.CORS_ORIGINS,
        REDIS_URL=settings.REDIS_URL,
        REDIS_ENABLED=settings.REDIS_ENABLED,
        LOG_LEVEL=settings.LOG_LEVEL,
    )

    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    # Connection handles live on the app, not in module globals
    database = Database(build_engine(
        app.config["DATABASE_URL"],
        pool_size=settings.DB_POOL_SIZE,
        max_open=settings.DB_MAX_OPEN,
        echo=app.config["DEBUG"] and not app.config.get("TESTING", False),
    ))
    cache = RedisCache(app.config["REDIS_URL"], enabled=app.config["REDIS_ENABLED"])
    cache.connect()

    app.extensions = getattr(app, "extensions", {})
    app.extensions["database"] = database
    app.extensions["cache"] = cache

    init_security(app, app.config["CORS_ORIGINS"])

    from .routes import health_bp, register_error_handlers, users_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(users_bp, url_prefix=f"{app.config['API_PREFIX']}/users")
    register_error_handlers(app)

    # helper to create DB tables based on SQLAlchemy models
    def init_db():
        try:
            database.create_all()
        except Exception as e:
            logging.exception("init_db failed: %s", e)
            raise

    app.init_db = init_db

    return app


def close_connections(app: Flask) -> None:
    """Dispose the database pool and close Redis."""
    cache = app.extensions.get("cache")
    if cache is not None:
        cache.close()
    database = app.extensions.get("database")
    if database is not None:
        database.dispose()

