from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError


class SessionRequired(ValidationError):
    default_detail = "Session ID is required"
    default_code = "session_required"


class UserNotFound(NotFound):
    default_detail = "User not found"
    default_code = "user_not_found"


class UserAlreadyExists(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "A user already exists for this session"
    default_code = "user_already_exists"
