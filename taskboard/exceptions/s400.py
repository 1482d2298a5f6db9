
from .base import BaseCustomHTTPException


class EmailAlreadyRegisteredException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "Email already registered")


class UsernameAlreadyTakenException(BaseCustomHTTPException):
    def __init__(self):
        super().__init__(400, "A user with this username already exists")


class InvalidWebsocketMessageException(BaseCustomHTTPException):
    def __init__(self, message: str):
        super().__init__(400, f"Invalid message: {message}")
