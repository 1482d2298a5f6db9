
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from redis.asyncio import Redis

from database.redis import RedisType, get_redis_client
from database.repositories import UserRepository
from taskboard.config import Config
from taskboard.depends import get_user, get_user_repo
from taskboard.exceptions import *
from taskboard.schemas import (CredsSchema, LoggedUserSchema,
                               LoginResponseSchema, RegisterSchema, UserSchema)
from taskboard.token import AccessToken

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(register_data: RegisterSchema,
                   ur: UserRepository = Depends(get_user_repo)
                   ):
    if await ur.get_by_email(register_data.email) is not None:
        raise EmailAlreadyRegisteredException()
    if await ur.get_by_username(register_data.username) is not None:
        raise UsernameAlreadyTakenException()
    user = await ur.create(register_data.username,
                           register_data.email,
                           register_data.password)
    if user is None:
        raise SendFeedbackToAdminException()
    logger.info("Registered user %s (%s)", user.id, user.username)
    return {"message": "User created successfully"}


@router.post("/login")
async def login(request: Request,
                response: Response,
                credentials: CredsSchema,
                redis: Redis = Depends(get_redis_client),
                ur: UserRepository = Depends(get_user_repo)
                ) -> LoginResponseSchema:
    ip = request.client.host if request.client else "unknown"
    counter_key = f"{RedisType.incorrect_credentials_ip.value}:{ip}"
    ip_counter = await redis.get(counter_key)
    if ip_counter is not None:
        if int(ip_counter) >= Config.ip_buffer:
            raise TooManyIncorrectCredentialsException(ip)
    else:
        ip_counter = 0
    user = await ur.get_by_auth(credentials.email, credentials.password)
    if user is None:
        await redis.set(counter_key, int(ip_counter) + 1, ex=Config.ip_buffer_lifetime)
        logger.info("Failed login for %s from %s", credentials.email, ip)
        raise InvalidCredentialsException()
    access = AccessToken(UserSchema.from_db(user))
    token = access.to_token()
    response.set_cookie(key="access_token", value=token,
                        max_age=Config.access_token_lifetime, httponly=True)
    return LoginResponseSchema(user=LoggedUserSchema(id=user.id,
                                                     username=user.username,
                                                     email=user.email,
                                                     access_token=token))


@router.get("/user_info")
async def get_user_info(user: UserSchema = Depends(get_user)) -> UserSchema:
    return user
