from datetime import datetime, timezone

from ..extensions import db


def _utcnow() -> datetime:
	return datetime.now(timezone.utc)


class User(db.Model):
	__tablename__ = "users"

	id = db.Column(db.Integer, primary_key=True)
	name = db.Column(db.String(255), nullable=False)
	email = db.Column(db.String(255), unique=True, nullable=False, index=True)
	password_hash = db.Column(db.String(255), nullable=False)
	created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

	def __repr__(self) -> str:  # pragma: no cover 简单repr无需测试
		return f"<User {self.email}>"


# 邮箱按原样存储，唯一性不区分大小写
db.Index("uq_users_email_lower", db.func.lower(User.email), unique=True)
