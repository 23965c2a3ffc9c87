import logging
from datetime import datetime, UTC, timedelta
from typing import Annotated

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from config import settings
from utils.errors import UnauthorizedError

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (토큰 없는 익명 요청도 허용, 401은 직접 처리)
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    username: str
    is_admin: bool = False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_user_token(username: str, is_admin: bool = False) -> str:
    return create_access_token(data={"sub": username, "is_admin": is_admin})


def decode_access_token(token: str) -> dict:
    """token decoding"""
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("token is expired")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("invalid token")


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> CurrentUser | None:
    """토큰이 있으면 현재 유저 반환, 없으면 None (익명)"""
    if credentials is None:
        return None

    payload = decode_access_token(credentials.credentials)
    username = payload.get("sub")
    if not username:
        raise UnauthorizedError("invalid token")
    return CurrentUser(username=username, is_admin=payload.get("is_admin") is True)


def ensure_admin(
        user: CurrentUser | None = Depends(get_current_user)
) -> CurrentUser:
    """관리자 권한 확인 (로그인 안 했거나 관리자가 아니면 401)"""
    if user is None or not user.is_admin:
        logger.info("admin required: user=%s", user.username if user else None)
        raise UnauthorizedError("Unauthorized")
    return user


AdminUser = Annotated[CurrentUser, Depends(ensure_admin)]
