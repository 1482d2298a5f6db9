from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from taskboard.config import SECRET, Config
from taskboard.exceptions import (AccessTokenDamagedException,
                                  AccessTokenExpiredException)
from taskboard.schemas.user import UserSchema


class AccessToken:
    def __init__(self,
                 user: UserSchema,
                 created_date: datetime | None = None,
                 lifetime: timedelta = timedelta(seconds=Config.access_token_lifetime)
                 ):
        self.user = user
        self.created_date = created_date or datetime.now(UTC).replace(tzinfo=None)
        self.lifetime = lifetime

    def to_token(self) -> str:
        issued_at = self.created_date.replace(tzinfo=UTC)
        payload = {
            "sub": str(self.user.id),
            "username": self.user.username,
            "email": self.user.email,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, SECRET, algorithm=Config.algorithm)

    @classmethod
    def from_token(cls, token: str) -> "AccessToken":
        try:
            payload = jwt.decode(token, SECRET, algorithms=[Config.algorithm])
            user = UserSchema(id=UUID(payload["sub"]),
                              username=payload["username"],
                              email=payload["email"])
            created_date = datetime.fromtimestamp(payload["iat"], UTC).replace(tzinfo=None)
            expires = datetime.fromtimestamp(payload["exp"], UTC).replace(tzinfo=None)
        except jwt.ExpiredSignatureError:
            raise AccessTokenExpiredException()
        except (jwt.InvalidTokenError, KeyError, TypeError, ValueError, OverflowError):
            raise AccessTokenDamagedException()
        return cls(user, created_date, expires - created_date)
