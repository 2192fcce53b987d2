# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- SQLite 파일에 대한 SQLModel 비동기 엔진을 설정합니다 (aiosqlite 드라이버).
- 모든 연결에서 외래 키 제약(PRAGMA foreign_keys)을 활성화합니다.
- 쓰기 작업을 위한 트랜잭션 경계(transaction)를 제공합니다.
  정상 종료 시 커밋, 예외 발생 시 롤백 후 재발생, 커밋 실패도 그대로 전파합니다.
- 저장소 파일이 없을 때 한 번만 스키마와 시드 레코드를 생성합니다.
"""

import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# 애플리케이션 설정을 임포트합니다.
from app.core.config import settings, sqlite_url

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# 모든 SQLModel 클래스가 SQLModel.metadata에 등록되도록 명시적으로 임포트해야
# create_all 과 참조 검사(crud_base)가 모든 테이블을 인식합니다.
from app.domains.shared import models as shared_models  # noqa
from app.domains.usr import models as usr_models
from app.domains.loc import models  # noqa
from app.domains.ven import models  # noqa
from app.domains.img import models  # noqa
from app.domains.inv import models  # noqa

logger = logging.getLogger(__name__)

# 시드 레코드 (초기화 직후 항상 존재해야 하는 Id=1 레코드)
SYSTEM_USER_ID = 1
SYSTEM_ROLE_ID = 1
UNASSIGNED_OU_ID = 1


# =============================================================================
# 1. 엔진 및 세션 팩토리
# =============================================================================
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(db_path: Optional[str] = None, *, echo: bool = False) -> AsyncEngine:
    """
    SQLite 파일에 대한 비동기 엔진을 생성합니다. 경로를 생략하면 설정의 DATABASE_URL 을 사용합니다.
    CLI 와 테스트는 파일 경로를 넘겨 별도의 엔진을 만들어 사용합니다.
    """
    async_engine = create_async_engine(
        sqlite_url(db_path) if db_path else settings.DATABASE_URL,
        echo=echo,  # 디버그 모드일 때만 SQL 쿼리 출력
        future=True,
    )
    event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return async_engine


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# 프로세스 전역 엔진과 '세션 공장'
engine: AsyncEngine = build_engine(echo=settings.DEBUG_MODE)
AsyncSessionLocal = build_session_factory(engine)

# SQLModel의 기본 MetaData 객체입니다.
metadata = SQLModel.metadata


# =============================================================================
# 2. 데이터베이스 초기화 (최초 1회 스키마 + 시드 생성)
# =============================================================================
def _seed_rows() -> list:
    seeded_at = datetime(2024, 6, 1, 14, 58, 36)
    return [
        usr_models.Role(
            id=SYSTEM_ROLE_ID,
            role_name="SYSTEM",
            description="Built-in system role",
            creator_id=SYSTEM_USER_ID,
            creation_date=datetime(2024, 6, 1, 14, 57, 41),
        ),
        usr_models.OrganizationalUnit(
            id=UNASSIGNED_OU_ID,
            ou_name="Unassigned",
            description="The OU used as a place holder when a system changes hands",
            creator_id=SYSTEM_USER_ID,
            creation_date=datetime(2024, 6, 1, 15, 38, 42),
        ),
        usr_models.User(
            id=SYSTEM_USER_ID,
            user_name="SYSTEM",
            full_name="Allocator System",
            status=usr_models.UserStatus.ENABLED,
            org_unit_id=UNASSIGNED_OU_ID,
            role_id=SYSTEM_ROLE_ID,
            # '!' 는 어떤 비밀번호의 다이제스트와도 일치하지 않으므로 SYSTEM 으로는 로그인할 수 없습니다.
            password_hash="!",
            creator_id=SYSTEM_USER_ID,
            creation_date=seeded_at,
            last_password_changed_date=seeded_at,
        ),
    ]


async def init_database(db_path: Optional[str] = None, bind: Optional[AsyncEngine] = None) -> bool:
    """
    저장소 파일이 존재하지 않으면 모든 테이블과 시드 레코드(SYSTEM 사용자/역할, Unassigned OU)를 생성합니다.
    이미 존재하면 아무 것도 하지 않습니다. 스키마 생성 중 오류는 호출자에게 그대로 전파됩니다(기동 중단).
    반환값: 새로 생성했으면 True
    """
    db_path = db_path or settings.DB_PATH
    bind = bind or engine

    if os.path.exists(db_path):
        logger.info("Using existing database at %s", db_path)
        return False

    logger.info("DB doesn't exist. Attempt to create it at %s", db_path)
    parent_dir = os.path.dirname(os.path.abspath(db_path))
    os.makedirs(parent_dir, exist_ok=True)

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSession(bind, expire_on_commit=False) as session:
        async with transaction(session):
            session.add_all(_seed_rows())

    logger.info("Database schema and seed rows created")
    return True


# =============================================================================
# 3. 비동기 데이터베이스 세션 의존성 주입 및 트랜잭션 경계
# =============================================================================
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI 의존성 주입을 위한 비동기 데이터베이스 세션 제너레이터입니다.
    요청마다 새로운 세션을 생성하고, 요청 처리 후 세션을 닫습니다.
    커밋되지 않은 작업은 세션 종료 시 롤백됩니다.
    """
    async with AsyncSessionLocal() as session:
        yield session


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """
    하나의 쓰기 작업(생성/수정/삭제)을 감싸는 트랜잭션 경계입니다.
    블록이 정상 종료되면 커밋하고, 예외가 발생하면 롤백한 뒤 예외를 다시 발생시킵니다.
    커밋 자체가 실패한 경우에도 롤백 후 오류를 전파합니다.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise


@asynccontextmanager
async def get_async_session_context(bind: Optional[AsyncEngine] = None) -> AsyncGenerator[AsyncSession, None]:
    """
    CLI 등 요청 컨텍스트 밖에서 사용할 수 있는
    독립적인 비동기 DB 세션을 제공하는 컨텍스트 관리자입니다.
    """
    factory = build_session_factory(bind) if bind is not None else AsyncSessionLocal
    async with factory() as session:
        async with transaction(session):
            yield session
