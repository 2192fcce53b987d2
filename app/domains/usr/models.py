# app/domains/usr/models.py

"""
'usr' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 계정과 권한 배정에 관련된 테이블 (Roles, OrganizationalUnits, Users)에 대한 SQLModel 클래스를 포함합니다.
각 클래스는 해당 SQLite 테이블의 구조와 컬럼을 Python 객체로 매핑하며,
SQLModel의 Field를 사용하여 데이터베이스 제약 조건을 정의합니다.

Roles/OrganizationalUnits 의 CreatorId 는 Users 와 서로 참조하는 순환을 피하기 위해
저장소 수준 외래 키 없이 정의되며, 애플리케이션 계층에서 생성자 검증을 수행합니다.
"""

from typing import Optional
from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime
from sqlalchemy.sql import func
from sqlmodel import Field, SQLModel

from app.domains.shared.models import RecordBase
from app.utils.timestamps import utc_now


# =============================================================================
# 계정 상태 Enum
# =============================================================================
class UserStatus(str, Enum):
    """
    사용자 계정 상태입니다. DB에는 문자열 값('enabled', 'locked')으로 저장됩니다.
    `locked` 계정은 비밀번호가 맞더라도 인증이 거부됩니다.
    """
    ENABLED = "enabled"
    LOCKED = "locked"


# =============================================================================
# 1. Roles 테이블 모델
# =============================================================================
class RoleBase(SQLModel):
    """
    Roles 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    role_name: str = Field(sa_column_kwargs={"name": "RoleName", "unique": True}, description="역할 이름")
    description: str = Field(sa_column_kwargs={"name": "Description"}, description="역할 설명")


class Role(RecordBase, RoleBase, table=True):
    """
    SQLite의 Roles 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "Roles"
    __table_args__ = {"sqlite_autoincrement": True}

    creator_id: Optional[int] = Field(default=None, nullable=False, sa_column_kwargs={"name": "CreatorId"})


# =============================================================================
# 2. OrganizationalUnits 테이블 모델
# =============================================================================
class OrganizationalUnitBase(SQLModel):
    """
    OrganizationalUnits 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    ou_name: str = Field(sa_column_kwargs={"name": "OUName", "unique": True}, description="조직 단위 이름")
    description: str = Field(sa_column_kwargs={"name": "Description"}, description="조직 단위 설명")


class OrganizationalUnit(RecordBase, OrganizationalUnitBase, table=True):
    """
    SQLite의 OrganizationalUnits 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "OrganizationalUnits"
    __table_args__ = {"sqlite_autoincrement": True}

    creator_id: Optional[int] = Field(default=None, nullable=False, sa_column_kwargs={"name": "CreatorId"})


# =============================================================================
# 3. Users 테이블 모델
# =============================================================================
class UserBase(SQLModel):
    """
    Users 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    user_name: str = Field(sa_column_kwargs={"name": "UserName", "unique": True}, description="로그인 사용자 이름")
    full_name: str = Field(sa_column_kwargs={"name": "FullName"}, description="사용자 전체 이름")
    status: str = Field(
        default=UserStatus.ENABLED.value,
        sa_column_kwargs={"name": "Status", "server_default": UserStatus.ENABLED.value},
        description="계정 상태 (enabled | locked)",
    )
    org_unit_id: int = Field(foreign_key="OrganizationalUnits.Id", sa_column_kwargs={"name": "OrgUnitId"}, description="소속 조직 단위 ID")
    role_id: int = Field(foreign_key="Roles.Id", sa_column_kwargs={"name": "RoleId"}, description="역할 ID")


class User(RecordBase, UserBase, table=True):
    """
    SQLite의 Users 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    `password_hash` 는 어떤 API 응답에도 포함되지 않습니다.
    """
    __tablename__ = "Users"
    __table_args__ = {"sqlite_autoincrement": True}

    password_hash: str = Field(sa_column_kwargs={"name": "PasswordHash"}, description="비밀번호 다이제스트 (hex SHA-512)")
    last_password_changed_date: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False,
        sa_type=DateTime,
        sa_column_kwargs={"name": "LastPasswordChangedDate", "server_default": func.current_timestamp()},
        description="마지막 비밀번호 변경 일시",
    )
