"""通知任务

由通知队列的后台线程调用，运行时已处于应用上下文中。
"""

import logging

from flask import current_app
from flask_mailman import EmailMessage

from ..constant import NotificationKind
from ..repositories import user_repo

logger = logging.getLogger(__name__)


def build_welcome_message(name: str, email: str) -> EmailMessage:
    app_name = current_app.config.get("APP_NAME", "our service")
    body = "\n".join([
        f"Hello {name},",
        "",
        f"Welcome to {app_name}! Your account has been created successfully.",
        f"You can now sign in with {email}.",
        "",
        "Thank you for joining us.",
    ])
    return EmailMessage(
        subject=f"Welcome to {app_name}!",
        body=body,
        from_email=current_app.config.get("MAIL_DEFAULT_SENDER"),
        to=[email],
    )


def send_welcome_email(user_id: int) -> bool:
    user = user_repo.get_by_id(user_id)
    if user is None:
        logger.warning("Welcome email skipped, user %s not found", user_id,
                       extra={"event": "mail.welcome.missing_user", "user_id": user_id})
        return False

    message = build_welcome_message(user.name, user.email)
    message.send()
    logger.info("Welcome email sent to user %s", user_id,
                extra={"event": "mail.welcome.sent", "user_id": user_id})
    return True


_HANDLERS = {
    NotificationKind.WELCOME: send_welcome_email,
}


def deliver(job) -> bool:
    handler = _HANDLERS.get(job.kind)
    if handler is None:
        raise ValueError(f"Unsupported notification kind: {job.kind}")
    return handler(job.user_id)
