import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends
from starlette.middleware.sessions import SessionMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app import API_PREFIX, APP_NAME, APP_VERSION
from app.core.config import settings
from app.core.database import engine, get_session, init_database
from app.core.exceptions import StoreError, register_exception_handlers
from app.core.logging_config import configure_logging
from app.core.schema_base import ERROR_RESPONSES

# 각 도메인의 라우터들을 임포트합니다.
from app.domains.usr.routers import router as usr_router
from app.domains.loc.routers import router as loc_router
from app.domains.ven.routers import router as ven_router
from app.domains.img.routers import router as img_router
from app.domains.inv.routers import router as inv_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 애플리케이션 시작 및 종료 시 실행될 비동기 작업을 정의합니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    시작 시 로깅을 구성하고 저장소 파일이 없으면 스키마와 시드 레코드를 생성합니다.
    초기화에 실패하면 예외가 전파되어 서버가 기동하지 않습니다.
    """
    configure_logging()
    logger.info("%s %s starting", APP_NAME, APP_VERSION)
    await init_database()

    yield  # 애플리케이션 실행

    logger.info("%s shutting down", APP_NAME)
    await engine.dispose()


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=APP_NAME,
    description="Inventory registry for provisioning: users, roles, organizational units, "
                "buildings, vendors, OS images and systems with their network interfaces and storage volumes.",
    version=APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan,
)

# -- 세션 봉투 미들웨어 --
# 인증 후 사용자 이름을 서명된 쿠키에 기록합니다. 인증은 매 요청마다 다시 수행됩니다.
app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY.get_secret_value(), session_cookie="allocator_session")

# -- 공통 오류 봉투 ({"error": ..., "detail": ...}) --
register_exception_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(usr_router, prefix=API_PREFIX, responses=ERROR_RESPONSES)
app.include_router(loc_router, prefix=API_PREFIX, responses=ERROR_RESPONSES)
app.include_router(ven_router, prefix=API_PREFIX, responses=ERROR_RESPONSES)
app.include_router(img_router, prefix=API_PREFIX, responses=ERROR_RESPONSES)
app.include_router(inv_router, prefix=API_PREFIX, responses=ERROR_RESPONSES)


# -- 헬스 체크 엔드포인트 --
# 애플리케이션과 데이터베이스의 연결 상태를 확인하는 엔드포인트입니다.
@app.get("/", summary="API Root", response_description="Status of the application and database connection.")
@app.get(f"{API_PREFIX}/health", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_session)):
    """
    데이터베이스에 `SELECT 1` 을 실행하여 서비스의 정상 작동 여부를 확인합니다.
    """
    result = await session.exec(select(1))
    if result.first() is None:
        raise StoreError("Database health check failed: no result from test query")
    return {"status": "ok", "database_connection": "successful"}


# -- Uvicorn 서버 직접 실행 (개발용) --
# UseTLS 가 켜져 있으면 TLS_TCP_PORT 에서 인증서/키 파일로 HTTPS 를 제공합니다.
if __name__ == "__main__":
    import uvicorn

    if settings.USE_TLS:
        uvicorn.run(
            "app.main:app",
            host="0.0.0.0",
            port=settings.TLS_TCP_PORT,
            ssl_certfile=settings.TLS_PEM_FILE,
            ssl_keyfile=settings.TLS_KEY_FILE,
            log_level=settings.LOG_LEVEL.lower(),
        )
    else:
        uvicorn.run("app.main:app", host="0.0.0.0", port=settings.TCP_PORT, log_level=settings.LOG_LEVEL.lower())
