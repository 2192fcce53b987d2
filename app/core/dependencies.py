# app/core/dependencies.py

"""
FastAPI 애플리케이션의 의존성 주입(Dependency Injection)을 정의하는 모듈입니다.

- 데이터베이스 세션 관리 (get_db_session).
- 현재 인증된 사용자 정보 획득 (get_current_user, HTTP Basic).
- 정수 경로 매개변수의 범위 (id_path, count_path).
"""

from typing import Any, AsyncGenerator

from fastapi import Path
from sqlmodel.ext.asyncio.session import AsyncSession

# 실제 데이터베이스 세션 제너레이터 임포트
from app.core.database import get_session as get_main_app_session

# 보안 관련 의존성 임포트
# flake8: noqa
from app.core.security import (
    basic_scheme,
    get_current_user,  # HTTP Basic 자격 증명으로 사용자 인증 (locked 계정 거부)
)
from app.core.schema_base import SQLITE_INTEGER_MAX
# 사용자 모델 임포트 (타입 힌팅에 필요)
from app.domains.usr.models import User as UsrUser


# --- 데이터베이스 세션 의존성 주입 ---
# routers 와 security 모두 같은 세션 의존성을 사용하므로,
# 테스트에서는 get_session 하나만 override 하면 됩니다.
get_db_session = get_main_app_session


# --- 경로 매개변수 ---
# 저장소 INTEGER 범위를 벗어난 값은 질의 전에 400 MalformedRequest 로 거부합니다.
def id_path(description: str = "레코드 ID") -> Any:
    return Path(..., ge=1, le=SQLITE_INTEGER_MAX, description=description)


def count_path(description: str) -> Any:
    return Path(..., ge=0, le=SQLITE_INTEGER_MAX, description=description)
