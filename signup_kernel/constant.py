from enum import Enum


class NotificationKind(Enum):
    WELCOME = "welcome"


REGISTER_SUCCESS_MESSAGE = "User registered successfully. A welcome email has been sent."
REGISTER_FAILED_MESSAGE = "Registration failed"
VALIDATION_FAILED_MESSAGE = "Validation failed"
INVALID_JSON_MESSAGE = "Invalid JSON"
