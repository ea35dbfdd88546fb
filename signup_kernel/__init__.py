# signup_kernel/__init__.py
import logging

from flask import Flask

from .blueprints import register_blueprints
from .config import get_config
from .extensions import db, mail, migrate
from .services.notification_queue import NotificationQueue


def _configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    app.logger.setLevel(level)


def create_app(config: str | None = None, **overrides):
    app = Flask(__name__)
    app.config.from_object(get_config(config))
    app.config.update(overrides)

    _configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)

    # 模型需在 create_all / 迁移前导入
    from .models import user  # noqa: F401

    notification_queue = NotificationQueue(
        maxsize=app.config.get("NOTIFICATION_QUEUE_MAXSIZE", 0),
        autostart=app.config.get("NOTIFICATION_QUEUE_AUTOSTART", True),
    )
    notification_queue.init_app(app)

    register_blueprints(app)
    return app
