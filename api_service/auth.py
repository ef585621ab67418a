# api_service/auth.py

import logging

from fastapi import APIRouter, Depends, status
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api_service.database import scoped_session_dependency
from api_service.errors import Conflict, Unauthorized
from api_service.repositories import UserRepository
from api_service.schemas import LoginResponse, Message, UserCreate, UserLogin
from api_service.security import TokenVerifier, get_token_verifier

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

auth_router = APIRouter()

EMAIL_TAKEN = "User with that email already exists"
USERNAME_TAKEN = "Username is already taken"
INVALID_CREDENTIALS = "Invalid credentials"


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


async def register_user(users: UserRepository, username: str, email: str, password: str):
    if await users.get_by_email(email):
        raise Conflict(EMAIL_TAKEN)
    if await users.get_by_username(username):
        raise Conflict(USERNAME_TAKEN)
    try:
        user = await users.add(username, email, get_password_hash(password))
    except IntegrityError:
        # lost a race with a concurrent registration
        raise Conflict("User with that email or username already exists")
    logger.info("Registered user %s", user.id)
    return user


async def authenticate_user(users: UserRepository, email: str, password: str):
    user = await users.get_by_email(email)
    if not user:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


@auth_router.post("/api/register", response_model=Message, status_code=status.HTTP_201_CREATED)
async def register(user: UserCreate, session: AsyncSession = Depends(scoped_session_dependency)):
    await register_user(UserRepository(session), user.username, user.email, user.password)
    return Message(message="User registered successfully")


@auth_router.post("/api/login", response_model=LoginResponse)
async def login(
    form_data: UserLogin,
    session: AsyncSession = Depends(scoped_session_dependency),
    verifier: TokenVerifier = Depends(get_token_verifier),
):
    user = await authenticate_user(UserRepository(session), form_data.email, form_data.password)
    if not user:
        logger.info("Rejected login attempt")
        raise Unauthorized(INVALID_CREDENTIALS)
    return LoginResponse(
        token=verifier.issue(user.id),
        email=user.email,
        username=user.username,
        user_id=user.id,
    )
