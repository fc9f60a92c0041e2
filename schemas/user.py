import re

from pydantic import BaseModel, EmailStr, StringConstraints, AfterValidator, ConfigDict
from typing import Annotated

# (정규식, 에러 메시지) - 회원가입 비밀번호는 네 가지 문자 종류를 모두 포함해야 한다
PASSWORD_RULES = [
    (re.compile(r"[A-Z]"), "비밀번호에 대문자가 포함되어야 합니다"),
    (re.compile(r"[a-z]"), "비밀번호에 소문자가 포함되어야 합니다"),
    (re.compile(r"\d"), "비밀번호에 숫자가 포함되어야 합니다"),
    (re.compile(r"[^A-Za-z0-9\s]"), "비밀번호에 특수문자가 포함되어야 합니다"),
]


def validate_password(password: str) -> str:
    for pattern, message in PASSWORD_RULES:
        if not pattern.search(password):
            raise ValueError(message)
    return password


# 해싱 전에 HMAC으로 고정 길이가 되므로 bcrypt 72바이트 제한과 무관
Password = Annotated[
    str,
    StringConstraints(
        min_length=8,
        max_length=64,
    ),
    AfterValidator(validate_password),
]

Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=25,
        pattern=r"^[A-Za-z0-9_]+$",
    ),
]

PersonName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=30),
]


class UserRegisterRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: Password
    first_name: PersonName
    last_name: PersonName
    email: EmailStr


class UserLoginRequest(BaseModel):
    model_config = ConfigDict(extra='forbid')

    username: Username
    password: str


class TokenResponse(BaseModel):
    token: str
