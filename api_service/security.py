# api_service/security.py

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Header, Request
from jose import JWTError, jwt

from api_service.errors import InvalidToken, Unauthenticated

NO_TOKEN_MESSAGE = "No token, authorization denied"
INVALID_TOKEN_MESSAGE = "Token is not valid"


@dataclass(frozen=True)
class Identity:
    user_id: str


class TokenVerifier:
    """Issues and checks the signed, time-limited bearer tokens.

    Routes only ever see ``verify``; swapping the signing scheme means
    replacing this class, nothing else.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else self.expires_delta)
        to_encode = {"sub": user_id, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise InvalidToken(INVALID_TOKEN_MESSAGE)
        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken(INVALID_TOKEN_MESSAGE)
        return Identity(user_id=user_id)


def get_token_verifier(request: Request) -> TokenVerifier:
    return request.app.state.token_verifier


def identity_from_header(authorization: Optional[str], verifier: TokenVerifier) -> Identity:
    if not authorization:
        raise Unauthenticated(NO_TOKEN_MESSAGE)
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidToken(INVALID_TOKEN_MESSAGE)
    return verifier.verify(token.strip())


async def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> Identity:
    return identity_from_header(authorization, get_token_verifier(request))
