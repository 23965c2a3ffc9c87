"""테스트 데이터 생성 스크립트

사용법:
    python scripts/seed.py

DATABASE_URL의 DB에 companies / jobs 테이블을 만들고 샘플 데이터를 넣는다.
마지막에 관리자 토큰을 출력 (POST/PATCH/DELETE 테스트용)
"""
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import delete, insert
from sqlalchemy.ext.asyncio import AsyncEngine

from db.models.company import Company
from db.models.job import Job
from db.session import create_tables, engine
from utils.auth import create_user_token

SAMPLE_COMPANIES = [
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "num_employees": 245,
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "logo_url": "/logos/logo3.png",
    },
    {
        "handle": "hall-davis",
        "name": "Hall-Davis",
        "num_employees": 749,
        "description": "Adult go economic off into. Suddenly happy according only common.",
        "logo_url": "/logos/logo2.png",
    },
]

SAMPLE_JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"),
     "company_handle": "bauer-gallagher"},
    {"title": "Information officer", "salary": 200000, "equity": None,
     "company_handle": "bauer-gallagher"},
    {"title": "Podiatrist", "salary": 68000, "equity": Decimal("0"),
     "company_handle": "anderson-arias-morrow"},
    {"title": "Transport planner", "salary": 123000, "equity": Decimal("0.091"),
     "company_handle": "hall-davis"},
]


async def seed(bind: AsyncEngine = engine) -> None:
    """모든 테스트 데이터 생성 (기존 데이터는 삭제)"""
    await create_tables(bind)

    async with bind.begin() as conn:
        await conn.execute(delete(Job))
        await conn.execute(delete(Company))
        await conn.execute(insert(Company), SAMPLE_COMPANIES)
        await conn.execute(insert(Job), SAMPLE_JOBS)

    await bind.dispose()

    print("✅ 테스트 데이터 생성 완료!")
    print(f"   - companies: {len(SAMPLE_COMPANIES)}")
    print(f"   - jobs: {len(SAMPLE_JOBS)}")
    print("\n🔑 관리자 토큰:")
    print(f"   {create_user_token('admin', is_admin=True)}")


if __name__ == "__main__":
    asyncio.run(seed())
