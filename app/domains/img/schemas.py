# app/domains/img/schemas.py

"""
'img' 도메인 (운영체제 이미지 카탈로그)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field

from app.core.schema_base import RecordRead, RequestSchema


# =============================================================================
# 1. 운영체제 계열 (OperatingSystemFamily) 스키마
# =============================================================================
class OperatingSystemFamilyCreate(RequestSchema):
    os_family_name: str = Field(..., alias="OSFamilyName", min_length=1)


class OperatingSystemFamilyUpdate(RequestSchema):
    os_family_name: Optional[str] = Field(None, alias="OSFamilyName", min_length=1)


class OperatingSystemFamilyRead(RecordRead):
    os_family_name: str = Field(..., alias="OSFamilyName")


# =============================================================================
# 2. 운영체제 (OperatingSystem) 스키마
# =============================================================================
class OperatingSystemCreate(RequestSchema):
    """새 운영체제 이미지를 등록하기 위한 모델입니다."""
    os_name: str = Field(..., alias="OSName", min_length=1, description="운영체제 이름")
    os_family_id: int = Field(..., alias="OSFamilyId", description="운영체제 계열 ID")
    vendor_id: int = Field(..., alias="VendorId", description="공급업체 ID")
    os_image_url: str = Field(..., alias="OSImageUrl", min_length=1, description="설치 이미지 위치")
    image_uri_protocol: str = Field(..., alias="ImageUriProtocol", description="이미지 URI 프로토콜")


class OperatingSystemUpdate(RequestSchema):
    os_name: Optional[str] = Field(None, alias="OSName", min_length=1)
    os_family_id: Optional[int] = Field(None, alias="OSFamilyId")
    vendor_id: Optional[int] = Field(None, alias="VendorId")
    os_image_url: Optional[str] = Field(None, alias="OSImageUrl", min_length=1)
    image_uri_protocol: Optional[str] = Field(None, alias="ImageUriProtocol")


class OperatingSystemRead(RecordRead):
    os_name: str = Field(..., alias="OSName")
    os_family_id: int = Field(..., alias="OSFamilyId")
    vendor_id: int = Field(..., alias="VendorId")
    os_image_url: str = Field(..., alias="OSImageUrl")
    image_uri_protocol: str = Field(..., alias="ImageUriProtocol")


# =============================================================================
# 3. 운영체제 버전 (OperatingSystemVersion) 스키마
# =============================================================================
class OperatingSystemVersionCreate(RequestSchema):
    operating_system_id: int = Field(..., alias="OperatingSystemId")
    version_number: str = Field(..., alias="VersionNumber", min_length=1)


class OperatingSystemVersionUpdate(RequestSchema):
    operating_system_id: Optional[int] = Field(None, alias="OperatingSystemId")
    version_number: Optional[str] = Field(None, alias="VersionNumber", min_length=1)


class OperatingSystemVersionRead(RecordRead):
    operating_system_id: int = Field(..., alias="OperatingSystemId")
    version_number: str = Field(..., alias="VersionNumber")
