import hmac
import logging
from datetime import datetime, UTC, timedelta
from typing import Any

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings

logger = logging.getLogger(__name__)

# 토큰이 없어도 요청은 통과 (익명 사용자)
security = HTTPBearer(auto_error=False)


def _peppered(password: str) -> bytes:
    """
    bcrypt 입력값: HMAC-SHA256(pepper, password)의 hex (항상 64바이트)
    users.password 컬럼에는 pepper 없이는 검증할 수 없는 해시만 저장된다.
    """
    digest = hmac.new(settings.password_pepper.encode(), password.encode(), "sha256")
    return digest.hexdigest().encode()


def hash_password(password: str) -> str:
    """회원가입/시드 데이터용 bcrypt 해시"""
    return bcrypt.hashpw(_peppered(password), bcrypt.gensalt()).decode()


# /auth/token: 없는 username도 같은 비용의 bcrypt 비교를 거친다
DUMMY_HASH = hash_password("jobly-unknown-user")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_peppered(plain_password), hashed_password.encode())
    except ValueError:
        logger.warning("Stored password is not a bcrypt hash")
        return False


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_user_token(username: str, is_admin: bool) -> str:
    return create_access_token(data={"sub": username, "is_admin": is_admin})


def decode_access_token(token: str) -> dict[str, Any]:
    """token decoding (실패 시 jwt.InvalidTokenError)"""
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])


def get_current_user(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> dict[str, Any] | None:
    """
    토큰이 있으면 검증 후 payload 반환.
    토큰이 없거나 유효하지 않아도 에러가 아니다 (None = 익명).
    """
    if credentials is None:
        return None

    try:
        return decode_access_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        logger.warning("Expired token - continuing as anonymous")
    except jwt.InvalidTokenError as e:
        logger.warning("Invalid token - continuing as anonymous: %s", e)
    return None


def ensure_admin(
        user: dict[str, Any] | None = Depends(get_current_user)
) -> dict[str, Any]:
    """관리자 토큰이 아니면 401"""
    if user is None or not user.get("is_admin"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return user
