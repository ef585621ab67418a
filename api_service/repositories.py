# api_service/repositories.py

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from api_service.models import Question, User


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: str) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def add(self, username: str, email: str, hashed_password: str) -> User:
        user = User(username=username, email=email, hashed_password=hashed_password)
        self.session.add(user)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(user)
        return user


class QuestionRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self) -> List[Question]:
        result = await self.session.execute(
            select(Question).order_by(Question.date_created.desc())
        )
        return list(result.scalars().all())

    async def get(self, question_id: str) -> Optional[Question]:
        return await self.session.get(Question, question_id)

    async def add(self, **fields: Any) -> Question:
        question = Question(**fields)
        self.session.add(question)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(question)
        return question

    async def update(self, question_id: str, fields: Dict[str, Any]) -> Optional[Question]:
        question = await self.get(question_id)
        if question is None:
            return None
        for name, value in fields.items():
            setattr(question, name, value)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(question)
        return question

    async def delete(self, question_id: str) -> bool:
        try:
            result = await self.session.execute(delete(Question).where(Question.id == question_id))
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return result.rowcount > 0
