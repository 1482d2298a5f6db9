
from uuid import UUID

import bcrypt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import User


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def check_password(password: str, hashed: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


class UserRepository:
    def __init__(self, session: AsyncSession, bcrypt_rounds: int = 10):
        self.session = session
        self.bcrypt_rounds = bcrypt_rounds

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(User).where(User.email == email)
        return await self.session.scalar(stmt)

    async def get_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return await self.session.scalar(stmt)

    async def create(self, username: str, email: str, password: str) -> User | None:
        user = User(username=username,
                    email=email,
                    password=hash_password(password, self.bcrypt_rounds))
        self.session.add(user)
        await self.session.commit()
        return await self.get_by_id(user.id)

    async def get_by_auth(self, email: str, password: str) -> User | None:
        user = await self.get_by_email(email)
        if user is None:
            return None
        if not check_password(password, user.password):
            return None
        return user
