"""用户数据访问仓库

抽象出数据库访问逻辑，方便后续替换为其它存储。
唯一性由数据库约束保证，IntegrityError 会被转换为 UniquenessViolation。"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..exceptions import StoreUnavailable, UniquenessViolation
from ..extensions import db
from ..models.user import User

logger = logging.getLogger(__name__)


def get_by_id(user_id: int) -> User | None:
	return db.session.get(User, user_id)


def get_by_email(email: str) -> User | None:
	return User.query.filter_by(email=email).first()


def count_by_email(email: str) -> int:
	return User.query.filter_by(email=email).count()


def create_user(name: str, email: str, password_hash: str) -> User:
	"""创建用户并提交。

	失败时先回滚会话，保证不会留下半条记录。

	Raises:
		UniquenessViolation: 邮箱已存在
		StoreUnavailable: 其它数据库错误
	"""
	user = User(name=name,
			    email=email,
				password_hash=password_hash)
	db.session.add(user)
	try:
		db.session.commit()
	except IntegrityError as exc:
		db.session.rollback()
		logger.warning("User insert rejected by unique constraint",
				 extra={"event": "user.store.duplicate"})
		raise UniquenessViolation(f"A user with email '{user.email}' already exists") from exc
	except SQLAlchemyError as exc:
		db.session.rollback()
		logger.error("User store unavailable: %s", exc,
			   extra={"event": "user.store.unavailable"})
		raise StoreUnavailable(str(exc)) from exc
	return user
