import logging
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from ..constant import INVALID_JSON_MESSAGE, VALIDATION_FAILED_MESSAGE
from ..services import user_tasks
from ..utils.validators import validate_register_request

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__, url_prefix="/api")

'''
通信数据格式：
发送格式：
{
	"name":"xxxx",
	"email":"xxxx",
	"password":"xxxx"
}
返回格式：
201:
{
	"success": true,
	"message": "xxxx",
	"data": {"user": {"id": 1, "name": "xxxx", "email": "xxxx", "created_at": "..."}}
}
500:
{
	"success": false,
	"message": "Registration failed",
	"error": "xxxx"
}
'''
@api_bp.post("/register")
def register():
	recived_data = request.get_json(silent=True)
	if not isinstance(recived_data, dict):
		return jsonify({"success": False, "message": INVALID_JSON_MESSAGE}), HTTPStatus.BAD_REQUEST

	register_request, errors = validate_register_request(
		recived_data, current_app.config.get("PASSWORD_MIN_LENGTH", 8)
	)
	if errors:
		logger.info("Registration request rejected", extra={"event": "user.register.invalid",
													   "fields": sorted(errors)})
		return jsonify({
			"success": False,
			"message": VALIDATION_FAILED_MESSAGE,
			"errors": errors,
		}), HTTPStatus.UNPROCESSABLE_ENTITY

	# 调用 service 层注册用户
	result = user_tasks.Register(
		register_request.name,
		register_request.email,
		register_request.password,
	)
	return jsonify(result.to_payload()), result.status_code


def register_blueprints(app):
	app.register_blueprint(api_bp)
