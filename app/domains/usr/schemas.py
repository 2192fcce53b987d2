# app/domains/usr/schemas.py

"""
'usr' 도메인 (사용자, 역할, 조직 단위 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime

from pydantic import BaseModel, field_serializer, field_validator
from sqlmodel import Field

from app.core.schema_base import RecordRead, RequestSchema
from app.utils.timestamps import normalize_timestamp


def _not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be empty")
    return value


# =============================================================================
# 1. 역할 (Role) 스키마
# =============================================================================
class RoleCreate(RequestSchema):
    role_name: str = Field(..., alias="RoleName", min_length=1)
    description: str = Field("", alias="Description")

    check_name = field_validator("role_name")(_not_blank)


class RoleUpdate(RequestSchema):
    role_name: Optional[str] = Field(None, alias="RoleName", min_length=1)
    description: Optional[str] = Field(None, alias="Description")


class RoleRead(RecordRead):
    role_name: str = Field(..., alias="RoleName")
    description: str = Field(..., alias="Description")


# =============================================================================
# 2. 조직 단위 (OrganizationalUnit) 스키마
# =============================================================================
class OrganizationalUnitCreate(RequestSchema):
    ou_name: str = Field(..., alias="OUName", min_length=1)
    description: str = Field("", alias="Description")

    check_name = field_validator("ou_name")(_not_blank)


class OrganizationalUnitUpdate(RequestSchema):
    ou_name: Optional[str] = Field(None, alias="OUName", min_length=1)
    description: Optional[str] = Field(None, alias="Description")


class OrganizationalUnitRead(RecordRead):
    ou_name: str = Field(..., alias="OUName")
    description: str = Field(..., alias="Description")


# =============================================================================
# 3. 사용자 (User) 스키마
# =============================================================================
class UserCreate(RequestSchema):
    """사용자 생성을 위한 스키마 (비밀번호는 평문으로 받아 서버에서 다이제스트로 저장)"""
    user_name: str = Field(..., alias="UserName", min_length=1, description="로그인 사용자 이름")
    full_name: str = Field(..., alias="FullName", description="사용자 전체 이름")
    password: str = Field(..., alias="Password", min_length=1, description="초기 비밀번호")
    org_unit_id: int = Field(1, alias="OrgUnitId", description="소속 조직 단위 ID (기본: Unassigned)")
    role_id: int = Field(..., alias="RoleId", description="역할 ID")

    check_name = field_validator("user_name")(_not_blank)


class UserRead(RecordRead):
    """
    API 응답용 사용자 스키마 (SafeUser).
    비밀번호 다이제스트 필드는 존재하지 않으므로 어떤 경로로도 노출되지 않습니다.
    """
    user_name: str = Field(..., alias="UserName")
    full_name: str = Field(..., alias="FullName")
    status: str = Field(..., alias="Status")
    org_unit_id: int = Field(..., alias="OrgUnitId")
    role_id: int = Field(..., alias="RoleId")
    last_password_changed_date: Optional[datetime] = Field(None, alias="LastPasswordChangedDate")

    @field_serializer("last_password_changed_date")
    def _serialize_password_date(self, value: Optional[datetime]) -> Optional[str]:
        return normalize_timestamp(value)


class PasswordChange(RequestSchema):
    """비밀번호 변경 요청"""
    old_password: str = Field(..., alias="OldPassword")
    new_password: str = Field(..., alias="NewPassword", min_length=1)


class UserStatusUpdate(RequestSchema):
    """
    계정 상태 변경 요청.
    허용 값 검사는 CRUD 계층에서 수행하여 InvalidStatusValue 로 보고합니다.
    """
    status: str = Field(..., alias="Status")


class UserOrgUnitUpdate(RequestSchema):
    org_unit_id: int = Field(..., alias="OrgUnitId")


class UserRoleUpdate(RequestSchema):
    role_id: int = Field(..., alias="RoleId")


# =============================================================================
# 4. 응답 스키마
# =============================================================================
class UserStatusResponse(BaseModel):
    message: str
    userStatus: str


class UserOrgUnitResponse(BaseModel):
    message: str
    orgUnitId: int


class UserRoleResponse(BaseModel):
    message: str
    roleId: int
