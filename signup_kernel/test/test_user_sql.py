#user_tasks.py / user_repo.py 单元测试
import pytest
from sqlalchemy.exc import OperationalError

from .. import create_app
from ..constant import NotificationKind, REGISTER_FAILED_MESSAGE, REGISTER_SUCCESS_MESSAGE
from ..exceptions import QueueError, StoreUnavailable, UniquenessViolation
from ..extensions import db
from ..models.user import User
from ..repositories import user_repo
from ..services.user_tasks import Register, verify_password


class RecordingQueue:
    def __init__(self):
        self.jobs = []

    def enqueue(self, user_id, kind=NotificationKind.WELCOME):
        self.jobs.append((user_id, kind))


class FailingQueue:
    def enqueue(self, user_id, kind=NotificationKind.WELCOME):
        raise QueueError("Notification queue is stopped")


class UnavailableStore:
    def __init__(self):
        self.calls = 0

    def create_user(self, name, email, password_hash):
        self.calls += 1
        raise StoreUnavailable("database is unreachable")


##################################
#单元测试创建运行环境
@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def notification_queue():
    return RecordingQueue()
##################################


##################################
#注册验证单元测试
def test_Register(app, notification_queue):
    result = Register("Ana", "ana@example.com", "Secret123!", notification_queue=notification_queue)

    assert result.success is True
    assert result.status_code == 201
    assert result.message == REGISTER_SUCCESS_MESSAGE
    assert result.user["name"] == "Ana"
    assert result.user["email"] == "ana@example.com"
    assert result.user["id"] is not None
    assert result.user["created_at"] is not None
    assert set(result.user) == {"id", "name", "email", "created_at"}

    u = user_repo.get_by_email("ana@example.com")
    assert u is not None, "注册后应能在数据库中查询到用户"
    assert u.password_hash != "Secret123!"
    assert verify_password(u, "Secret123!") is True
    assert verify_password(u, "wrong-password") is False

    # 恰好投递一条欢迎通知，引用新用户
    assert notification_queue.jobs == [(u.id, NotificationKind.WELCOME)]


def test_Register_payload_never_contains_password(app, notification_queue):
    result = Register("Bo", "bo@example.com", "Hunter2Hunter2", notification_queue=notification_queue)
    payload = result.to_payload()

    assert payload["success"] is True
    assert "Hunter2Hunter2" not in str(payload)
    assert "password" not in str(payload)


def test_Register_duplicate_email(app, notification_queue):
    first = Register("Ana", "ana@example.com", "Secret123!", notification_queue=notification_queue)
    second = Register("Ana", "ana@example.com", "Secret123!", notification_queue=notification_queue)

    assert first.success is True
    assert second.success is False
    assert second.status_code == 500
    assert second.message == REGISTER_FAILED_MESSAGE
    assert "already exists" in second.error
    assert second.to_payload() == {
        "success": False,
        "message": REGISTER_FAILED_MESSAGE,
        "error": second.error,
    }

    assert user_repo.count_by_email("ana@example.com") == 1
    assert len(notification_queue.jobs) == 1


def test_Register_store_unavailable(app, notification_queue):
    store = UnavailableStore()
    result = Register("Cy", "cy@example.com", "Secret123!", store=store,
                      notification_queue=notification_queue)

    assert store.calls == 1
    assert result.success is False
    assert result.status_code == 500
    assert result.error == "database is unreachable"
    assert notification_queue.jobs == []
    assert User.query.count() == 0


def test_Register_queue_failure_keeps_user(app):
    result = Register("Di", "di@example.com", "Secret123!", notification_queue=FailingQueue())

    assert result.success is False
    assert result.message == REGISTER_FAILED_MESSAGE
    assert result.error == "Notification queue is stopped"
    # 队列失败不回滚已创建的用户
    assert user_repo.count_by_email("di@example.com") == 1


def test_Register_without_app_queue_fails_cleanly(app):
    app.extensions.pop("notification_queue")

    result = Register("Ed", "ed@example.com", "Secret123!")

    assert result.success is False
    assert result.status_code == 500
    assert user_repo.count_by_email("ed@example.com") == 0
##################################


##################################
#用户仓库单元测试
def test_create_user_duplicate_raises(app):
    user_repo.create_user("Ana", "ana@example.com", "hash-1")

    with pytest.raises(UniquenessViolation):
        user_repo.create_user("Another Ana", "ana@example.com", "hash-2")

    # 会话已回滚，仍可继续使用
    assert user_repo.count_by_email("ana@example.com") == 1
    assert user_repo.get_by_email("ana@example.com").name == "Ana"


def test_create_user_store_error_leaves_no_record(app, monkeypatch):
    def broken_commit():
        raise OperationalError("INSERT INTO users", {}, Exception("database is locked"))

    monkeypatch.setattr(db.session, "commit", broken_commit)

    with pytest.raises(StoreUnavailable):
        user_repo.create_user("Fay", "fay@example.com", "hash")

    monkeypatch.undo()
    assert user_repo.count_by_email("fay@example.com") == 0


def test_get_by_id(app):
    user = user_repo.create_user("Gus", "gus@example.com", "hash")

    assert user_repo.get_by_id(user.id).email == "gus@example.com"
    assert user_repo.get_by_id(user.id + 1000) is None
##################################


##################################
#邮箱大小写：原样存储，唯一性不区分大小写
def test_create_user_keeps_email_case(app):
    user = user_repo.create_user("Ana", "Ana@EXAMPLE.com", "hash")

    assert user.email == "Ana@EXAMPLE.com"
    with pytest.raises(UniquenessViolation):
        user_repo.create_user("Ana", "ana@example.com", "hash")
    assert User.query.count() == 1
##################################
