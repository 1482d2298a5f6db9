

from uuid import UUID

from pydantic import EmailStr, Field

from database.models import User

from .base import CamelSchema


class UserSchema(CamelSchema):
    id: UUID
    username: str
    email: str

    @classmethod
    def from_db(cls, user: User) -> "UserSchema":
        return cls(id=user.id, username=user.username, email=user.email)


class CredsSchema(CamelSchema):
    email: EmailStr
    password: str


class RegisterSchema(CamelSchema):
    username: str = Field(min_length=1, max_length=64)
    email: EmailStr
    password: str = Field(min_length=6)


class LoggedUserSchema(UserSchema):
    access_token: str


class LoginResponseSchema(CamelSchema):
    user: LoggedUserSchema
