# app/core/security.py

"""
애플리케이션의 보안 관련 유틸리티 함수 및 의존성 주입을 정의하는 모듈입니다.

- 비밀번호 다이제스트 생성 및 검증 (hex SHA-512, 기존 저장소와 호환).
- HTTP Basic 자격 증명으로 현재 사용자 획득 (요청마다 재검증).
- 계정 상태(enabled/locked) 게이트.

참고: 저장된 다이제스트는 솔트가 없는 SHA-512 입니다. 기존 저장소와의 호환을 위해 유지하지만
알려진 보안 결함이며, CryptContext 에 메모리 하드 KDF 를 추가하고 `needs_update` 로
로그인 시 재해싱하는 방식으로 이전할 수 있습니다.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from passlib.context import CryptContext  # 비밀번호 해싱을 위한 라이브러리
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import get_session  # 데이터베이스 세션 의존성
from app.core.exceptions import Forbidden, Unauthenticated
from app.domains.usr import models as usr_models  # 사용자 모델 임포트 (충돌 방지를 위해 별칭 사용)

logger = logging.getLogger(__name__)

# --- 비밀번호 해싱 설정 ---
# hex_sha512: hex(SHA-512(password)), 검증은 상수 시간 비교로 수행됩니다.
pwd_context = CryptContext(schemes=["hex_sha512"], deprecated="auto")

# --- HTTP Basic 스키마 설정 ---
# auto_error=False: 자격 증명이 없을 때도 공통 오류 봉투(Unauthenticated)로 응답하기 위함
basic_scheme = HTTPBasic(auto_error=False, realm="allocator")

SESSION_USER_KEY = "user"


def get_password_hash(password: str) -> str:
    """
    주어진 비밀번호의 다이제스트를 계산합니다.
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    일반 텍스트 비밀번호와 저장된 다이제스트를 상수 시간으로 비교합니다.
    다이제스트 형식이 아닌 값(예: SYSTEM 계정의 '!')은 항상 불일치로 처리합니다.
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


async def authenticate_user(db: AsyncSession, *, user_name: str, password: str) -> usr_models.User:
    """
    사용자 이름/비밀번호를 검증하고 사용자 레코드를 반환합니다.
    - 알 수 없는 사용자 또는 비밀번호 불일치: Unauthenticated (401)
    - 상태가 enabled 가 아닌 사용자: Forbidden (403), 비밀번호가 맞더라도 거부
    """
    result = await db.exec(select(usr_models.User).where(usr_models.User.user_name == user_name))
    user = result.one_or_none()
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Authentication failed for '%s'", user_name)
        raise Unauthenticated("Invalid user name or password")
    if user.status != usr_models.UserStatus.ENABLED.value:
        logger.info("Rejected '%s': account is %s", user_name, user.status)
        raise Forbidden("Insufficient access. Access denied!")
    return user


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(basic_scheme),
    db: AsyncSession = Depends(get_session),
) -> usr_models.User:
    """
    HTTP Basic 자격 증명으로 현재 사용자를 데이터베이스에서 가져옵니다.
    세션 쿠키는 봉투로만 사용되며, 인증은 매 요청마다 다시 수행됩니다.
    """
    if credentials is None:
        raise Unauthenticated("Authorization header is required")

    user = await authenticate_user(db, user_name=credentials.username, password=credentials.password)

    if "session" in request.scope:
        request.session[SESSION_USER_KEY] = user.user_name
    logger.debug("Current user: %s (ID: %s)", user.user_name, user.id)
    return user
