import logging

import asyncpg
from fastapi import APIRouter, HTTPException, status

from db.repositories import users as user_repo
from schemas.commons import DBConnection
from schemas.user import UserLoginRequest, UserRegisterRequest, TokenResponse
from utils.auth import hash_password, verify_password, create_user_token, DUMMY_HASH

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["AUTH"],
)


@router.post("/token", response_model=TokenResponse)
async def get_auth_token(user: UserLoginRequest, conn: DBConnection) -> TokenResponse:
    """로그인 -> JWT 발급"""
    db_user = await user_repo.get(conn, user.username)

    # 타이밍 공격 방지: 유저 존재 여부와 관계없이 항상 해시 비교 수행
    hashed_password = db_user["password"] if db_user else DUMMY_HASH
    is_password_correct = verify_password(user.password, hashed_password)

    if db_user is None or not is_password_correct:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username/password",
        )

    return TokenResponse(token=create_user_token(db_user["username"], db_user["is_admin"]))


@router.post("/register", response_model=TokenResponse,
             status_code=status.HTTP_201_CREATED)
async def register(user: UserRegisterRequest, conn: DBConnection) -> TokenResponse:
    """회원가입 (일반 사용자) -> JWT 발급"""
    try:
        new_user = await user_repo.create(
            conn,
            username=user.username,
            hashed_password=hash_password(user.password),
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Duplicate username: {user.username}",
        )

    logger.info("User registered: %s", new_user["username"])
    return TokenResponse(token=create_user_token(new_user["username"], new_user["is_admin"]))
