
from .base import BaseCustomHTTPException


class AccessTokenDoesNotExistException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Access token doesn't exist")


class AccessTokenExpiredException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Access token has expired")


class AccessTokenDamagedException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Access token is corrupted")


class InvalidCredentialsException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(401, "Invalid credentials")


class TooManyIncorrectCredentialsException(BaseCustomHTTPException):
    def __init__(self, ip: str):
        super().__init__(401, f"Too many failed login attempts from IP: {ip}")


class NotProjectOwnerException(BaseCustomHTTPException):
    def __init__(self, action: str = "access"):
        super().__init__(401, f"You are not authorized to {action} this project")


class NotTaskOwnerException(BaseCustomHTTPException):
    def __init__(self, action: str = "access"):
        super().__init__(401, f"You are not authorized to {action} this task")
