"""用户注册服务

Register 依赖两个可注入的协作者：
- store: 提供 create_user(name, email, password_hash)，默认是 user_repo
- notification_queue: 提供 enqueue(user_id, kind)，默认取当前应用上的队列
"""

import logging
from http import HTTPStatus

from pydantic import BaseModel
from werkzeug.security import check_password_hash, generate_password_hash

from ..constant import REGISTER_FAILED_MESSAGE, REGISTER_SUCCESS_MESSAGE, NotificationKind
from ..models.user import User
from ..repositories import user_repo
from ..schemas.user_schema import user_schema
from .notification_queue import get_notification_queue

logger = logging.getLogger(__name__)

#####################################
# API Definition

class registration_result(BaseModel):
    success: bool
    message: str
    status_code: int
    user: dict | None = None
    error: str | None = None

    def to_payload(self) -> dict:
        if self.success:
            return {
                "success": True,
                "message": self.message,
                "data": {"user": self.user},
            }
        return {
            "success": False,
            "message": self.message,
            "error": self.error,
        }
#####################################


#####################################
#注册
def Register(name: str, email: str, password: str, *, store=None, notification_queue=None) -> registration_result:
    """创建用户并投递欢迎邮件任务。

    成功返回 201 结果；任何异常（存储或队列）都统一转换为 500 失败结果，
    不区分来源，也不回滚已创建的用户。
    """
    store = store or user_repo
    try:
        if notification_queue is None:
            notification_queue = get_notification_queue()

        user = store.create_user(name, email, generate_password_hash(password))

        # 只投递不等待，发信不占用请求时间
        notification_queue.enqueue(user.id, NotificationKind.WELCOME)

        logger.info("User %s registered", user.id,
                    extra={"event": "user.register.success", "user_id": user.id})
        return registration_result(
            success=True,
            message=REGISTER_SUCCESS_MESSAGE,
            status_code=HTTPStatus.CREATED,
            user=user_schema.dump(user),
        )
    except Exception as e:
        logger.exception("Registration failed: %s", e,
                         extra={"event": "user.register.failed"})
        return registration_result(
            success=False,
            message=REGISTER_FAILED_MESSAGE,
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            error=str(e),
        )
#####################################


#####################################
#校验密码
def verify_password(user: User, password: str) -> bool:
    return check_password_hash(user.password_hash, password)
#####################################
