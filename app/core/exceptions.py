# app/core/exceptions.py

"""
API 전반에서 사용하는 오류 종류(error kind)와 JSON 오류 핸들러를 정의하는 모듈입니다.

모든 실패 응답은 `{"error": <종류>, "detail": <사람이 읽을 수 있는 메시지>}` 형태를 가집니다.

| 종류                  | HTTP 상태 |
|-----------------------|-----------|
| MalformedRequest      | 400       |
| Unauthenticated       | 401       |
| Forbidden             | 403       |
| NotFound              | 400 (목록 조회가 비어 있으면 404) |
| Conflict              | 400       |
| ReferentialConflict   | 500       |
| InvalidStatusValue    | 400       |
| PasswordHashMismatch  | 400       |
| StoreError            | 500       |
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


# =============================================================================
# 1. 오류 종류별 예외 클래스
# =============================================================================
class AllocatorError(HTTPException):
    """
    모든 도메인 오류의 기본 클래스입니다.
    서브클래스는 `kind`, `status_code`, `default_detail` 만 재정의합니다.
    """
    kind: str = "StoreError"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal store error"

    def __init__(
        self,
        detail: Optional[str] = None,
        *,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(
            status_code=status_code or type(self).status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class MalformedRequest(AllocatorError):
    kind = "MalformedRequest"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Request payload is malformed"


class Unauthenticated(AllocatorError):
    kind = "Unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Authentication required"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail, headers={"WWW-Authenticate": "Basic"})


class Forbidden(AllocatorError):
    kind = "Forbidden"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Insufficient access. Access denied!"


class NotFound(AllocatorError):
    kind = "NotFound"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "no records found!"


class Conflict(AllocatorError):
    kind = "Conflict"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Record already exists"


class ReferentialConflict(AllocatorError):
    kind = "ReferentialConflict"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Record is still referenced by other records"


class InvalidStatusValue(AllocatorError):
    kind = "InvalidStatusValue"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Status must be one of: enabled, locked"


class PasswordHashMismatch(AllocatorError):
    kind = "PasswordHashMismatch"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Old password does not match"


class StoreError(AllocatorError):
    kind = "StoreError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal store error"


def no_records_found() -> NotFound:
    """빈 목록 조회에 대한 404 NotFound"""
    return NotFound("no records found!", status_code=status.HTTP_404_NOT_FOUND)


# 프레임워크가 직접 발생시키는 HTTPException 의 상태 코드를 오류 종류로 매핑합니다.
_KIND_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: MalformedRequest.kind,
    status.HTTP_401_UNAUTHORIZED: Unauthenticated.kind,
    status.HTTP_403_FORBIDDEN: Forbidden.kind,
    status.HTTP_404_NOT_FOUND: NotFound.kind,
    status.HTTP_405_METHOD_NOT_ALLOWED: MalformedRequest.kind,
    422: MalformedRequest.kind,
}


def error_body(kind: str, detail: Any) -> Dict[str, Any]:
    return {"error": kind, "detail": detail}


# =============================================================================
# 2. 예외 핸들러 등록
# =============================================================================
def register_exception_handlers(app: FastAPI) -> None:
    """
    FastAPI 애플리케이션에 JSON 오류 핸들러를 등록합니다.
    - 도메인 오류 (AllocatorError 서브클래스)
    - 프레임워크 HTTPException (상태 코드 기반 매핑)
    - 요청 본문 검증 오류 -> 400 MalformedRequest
    - 저장소 범위를 벗어난 정수 (OverflowError) -> 400 MalformedRequest
    - SQLAlchemy 오류 -> 500 StoreError
    """

    @app.exception_handler(AllocatorError)
    async def allocator_error_handler(request: Request, exc: AllocatorError):
        log = logger.error if exc.status_code >= 500 else logger.warning
        log("%s on %s %s: %s", exc.kind, request.method, request.url.path, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.kind, exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = _KIND_BY_STATUS.get(exc.status_code, StoreError.kind)
        logger.warning(
            "HTTP exception on %s %s - Status: %s, Detail: %s",
            request.method, request.url.path, exc.status_code, exc.detail,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(kind, exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        logger.warning("MalformedRequest on %s %s: %s", request.method, request.url.path, problems)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(MalformedRequest.kind, problems or MalformedRequest.default_detail),
        )

    @app.exception_handler(OverflowError)
    async def overflow_error_handler(request: Request, exc: OverflowError):
        # 본문의 정수 값이 SQLite INTEGER 범위를 벗어나면 드라이버가 바인딩 단계에서 OverflowError 를 냅니다.
        logger.warning("MalformedRequest on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(MalformedRequest.kind, "integer value out of range"),
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        cause = getattr(exc, "orig", None) or exc
        logger.error("StoreError on %s %s: %s", request.method, request.url.path, cause, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(StoreError.kind, str(cause)),
        )

    logger.info("Exception handlers registered")
