"""注册请求校验

校验在进入注册服务之前完成；邮箱唯一性不在这里检查，由数据库约束保证。
字段原样保留，不做大小写或空白归一化。
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, ValidationError, field_validator


class register_request(BaseModel):
    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    password: str

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    @field_validator("email")
    @classmethod
    def _email_syntax(cls, value: str) -> str:
        # 只校验格式，返回原值；validate_email 的规范化结果会改写域名大小写
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValueError(f"value is not a valid email address: {exc}") from exc
        return value


def validate_register_request(data: dict, min_password_length: int = 8) -> tuple[register_request | None, dict]:
    """返回 (请求对象, 错误字典)，两者之一为空。

    错误字典形如 {"email": ["..."]}。
    """
    errors: dict[str, list[str]] = {}
    request = None
    try:
        request = register_request.model_validate(data)
    except ValidationError as exc:
        for err in exc.errors():
            field = str(err["loc"][0]) if err["loc"] else "__root__"
            errors.setdefault(field, []).append(err["msg"])

    password = data.get("password")
    if isinstance(password, str) and len(password) < min_password_length:
        errors.setdefault("password", []).append(
            f"password must be at least {min_password_length} characters"
        )

    if errors:
        return None, errors
    return request, {}
