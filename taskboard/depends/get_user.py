from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from database.models import User
from database.repositories import UserRepository
from taskboard.exceptions import *
from taskboard.schemas import UserSchema
from taskboard.token import AccessToken

from .database import get_user_repo

bearer_scheme = HTTPBearer(auto_error=False)


async def get_user(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
                   access_token: str | None = Cookie(default=None)
                   ) -> UserSchema:
    token = credentials.credentials if credentials is not None else access_token
    if token is None:
        raise AccessTokenDoesNotExistException()
    return AccessToken.from_token(token).user


async def get_user_db(user: UserSchema = Depends(get_user),
                      ur: UserRepository = Depends(get_user_repo)
                      ) -> User:
    user_db = await ur.get_by_id(user.id)
    if user_db is None:
        raise UserNotFoundException(user.id)
    return user_db
