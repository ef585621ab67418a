# api_service/schemas.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(BaseModel):
    username: str
    email: str
    password: str


class UserLogin(BaseModel):
    email: str
    password: str


class Message(BaseModel):
    message: str


class LoginResponse(CamelModel):
    token: str
    email: str
    username: str
    user_id: str


class QuestionCreate(CamelModel):
    title: Optional[str] = None
    problem_statement: Optional[str] = None
    solution: Optional[str] = None
    topic: Optional[str] = None


class QuestionUpdate(CamelModel):
    title: Optional[str] = None
    problem_statement: Optional[str] = None
    solution: Optional[str] = None
    topic: Optional[str] = None


class QuestionResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    title: str
    problem_statement: Optional[str] = None
    solution: Optional[str] = None
    topic: Optional[str] = None
    date_created: datetime
    created_by: Optional[str] = None
