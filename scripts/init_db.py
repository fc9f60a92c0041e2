"""테이블 생성 + 테스트 데이터 생성 스크립트

사용법:
    python scripts/init_db.py

테스트 계정:
    - admin / Admin1234!  (관리자)
    - testuser / Test1234!
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.base import Base
from db.models import Company, Job, User
from db.session import engine, AsyncSessionLocal
from utils.auth import hash_password

# 테스트 계정 (평문 비밀번호)
TEST_USERS = [
    {
        "username": "admin",
        "password": "Admin1234!",
        "first_name": "Admin",
        "last_name": "User",
        "email": "admin@example.com",
        "is_admin": True,
    },
    {
        "username": "testuser",
        "password": "Test1234!",
        "first_name": "Test",
        "last_name": "User",
        "email": "test@example.com",
        "is_admin": False,
    },
]

TEST_COMPANIES = [
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
    {
        "handle": "edwards-lee-reese",
        "name": "Edwards, Lee and Reese",
        "num_employees": 744,
        "description": "To much recent it reality coach decision Mr.",
        "logo_url": "/logos/logo2.png",
    },
]

TEST_JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"),
     "company_handle": "bauer-gallagher"},
    {"title": "Information officer", "salary": 200000, "equity": None,
     "company_handle": "bauer-gallagher"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0.05"),
     "company_handle": "edwards-lee-reese"},
]


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def seed():
    """모든 테스트 데이터 생성"""
    await create_tables()

    async with AsyncSessionLocal() as db:
        for user in TEST_USERS:
            db.add(User(**{**user, "password": hash_password(user["password"])}))
        db.add_all(Company(**company) for company in TEST_COMPANIES)
        await db.flush()
        db.add_all(Job(**job) for job in TEST_JOBS)
        await db.commit()

    await engine.dispose()

    print("✅ 테스트 데이터 생성 완료!")
    print("\n👤 테스트 계정:")
    for user in TEST_USERS:
        print(f"   - username: {user['username']}")
        print(f"     password: {user['password']}")
        print()


if __name__ == "__main__":
    asyncio.run(seed())
