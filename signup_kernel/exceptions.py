"""注册流程的错误类型

PersistenceError 来自用户存储，QueueError 来自通知队列。
注册服务对二者不做区分，统一转换为失败结果。
"""


class RegistrationError(Exception):
    """Base class for registration errors."""


class PersistenceError(RegistrationError):
    """The user store could not create the record."""


class UniquenessViolation(PersistenceError):
    """A user with the same email already exists."""


class StoreUnavailable(PersistenceError):
    """The database rejected or could not serve the request."""


class QueueError(RegistrationError):
    """The notification queue refused the job."""
