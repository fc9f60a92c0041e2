from typing import Annotated, Any

import asyncpg
from fastapi import Depends, Path
from pydantic import Field, StringConstraints

from utils.auth import ensure_admin
from utils.database import get_connection

CompanyHandle = Annotated[
    str,
    Field(
        pattern=r"^[a-z0-9-]{1,25}$",
        description="회사 handle",
        examples=["bauer-gallagher"],
    ),
]

# INTEGER 컬럼 (int4) 범위
INT4_MAX = 2**31 - 1

JobId = Annotated[int, Field(ge=1, le=INT4_MAX, description="채용공고 ID")]

Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=100),
]

Description = Annotated[
    str,
    StringConstraints(strip_whitespace=True, max_length=2000),
]

Count = Annotated[int, Field(ge=0, le=INT4_MAX)]

JobIdPath = Annotated[int, Path(ge=1, le=INT4_MAX, description="채용공고 ID")]
CompanyHandlePath = Annotated[str, Path(pattern=r"^[a-z0-9-]{1,25}$", description="회사 handle")]

DBConnection = Annotated[asyncpg.Connection, Depends(get_connection)]
AdminUser = Annotated[dict[str, Any], Depends(ensure_admin)]
