from marshmallow import Schema, fields


class UserSchema(Schema):
	"""对外暴露的用户摘要，不含密码或其哈希。"""

	id = fields.Integer()
	name = fields.String()
	email = fields.String()
	created_at = fields.DateTime(format="iso")


user_schema = UserSchema()
