"""应用配置模块

提供不同环境的配置类，支持通过环境变量覆盖默认值。
"""

import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class SqlConfig:
    SQLALCHEMY_DATABASE_URI = "sqlite:///signup_kernel.sqlite3"
    SQLALCHEMY_TRACK_MODIFICATIONS = False


class MailConfig:
    MAIL_SERVER = "localhost"
    MAIL_PORT = 25
    MAIL_USERNAME = None
    MAIL_PASSWORD = None
    MAIL_USE_TLS = False
    MAIL_DEFAULT_SENDER = "no-reply@example.com"
    MAIL_BACKEND = "smtp"


class QueueConfig:
    # 0 表示不限长度
    NOTIFICATION_QUEUE_MAXSIZE = 0
    NOTIFICATION_QUEUE_AUTOSTART = True


class AppConfig(SqlConfig, MailConfig, QueueConfig):
    # 允许通过环境变量覆盖
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", SqlConfig.SQLALCHEMY_DATABASE_URI)

    MAIL_SERVER = os.getenv("MAIL_SERVER", MailConfig.MAIL_SERVER)
    MAIL_PORT = int(os.getenv("MAIL_PORT", MailConfig.MAIL_PORT))
    MAIL_USERNAME = os.getenv("MAIL_USERNAME", MailConfig.MAIL_USERNAME)
    MAIL_PASSWORD = os.getenv("MAIL_PASSWORD", MailConfig.MAIL_PASSWORD)
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", MailConfig.MAIL_USE_TLS)
    MAIL_DEFAULT_SENDER = os.getenv("MAIL_DEFAULT_SENDER", MailConfig.MAIL_DEFAULT_SENDER)
    MAIL_BACKEND = os.getenv("MAIL_BACKEND", MailConfig.MAIL_BACKEND)

    NOTIFICATION_QUEUE_MAXSIZE = int(os.getenv("NOTIFICATION_QUEUE_MAXSIZE", QueueConfig.NOTIFICATION_QUEUE_MAXSIZE))
    NOTIFICATION_QUEUE_AUTOSTART = _env_bool("NOTIFICATION_QUEUE_AUTOSTART", QueueConfig.NOTIFICATION_QUEUE_AUTOSTART)

    APP_NAME = os.getenv("APP_NAME", "Signup Kernel")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "8"))

    SSL_ENABLED = _env_bool("SSL_ENABLED", False)
    SSL_CERT_PATH = os.getenv("SSL_CERT_PATH")
    SSL_KEY_PATH = os.getenv("SSL_KEY_PATH")


class TestingConfig(AppConfig):
    TESTING = True
    # Flask-SQLAlchemy 对内存库自动使用 StaticPool
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    MAIL_BACKEND = "locmem"
    NOTIFICATION_QUEUE_AUTOSTART = False


def get_config(env: str | None = None):
    """
    返回用于 Flask app.config.from_object 的配置类。
    env 为 None 时读取环境变量 APP_ENV。
    """
    if env is None:
        env = os.getenv("APP_ENV", "")
    if env.strip().lower() == "testing":
        return TestingConfig
    return AppConfig
