# app/domains/img/models.py

"""
'img' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

운영체제 이미지 카탈로그는 세 단계 계층으로 구성됩니다.
 - OperatingSystemFamily: 운영체제 계열 (예: Linux, BSD)
 - OperatingSystem: 배포판/이미지 (계열과 공급업체를 참조)
 - OperatingSystemVersion: 운영체제별 버전 (같은 운영체제 안에서 버전 번호 고유)
"""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel

from app.domains.shared.models import RecordBase


# =============================================================================
# 1. OperatingSystemFamilies 테이블 모델
# =============================================================================
class OperatingSystemFamilyBase(SQLModel):
    os_family_name: str = Field(sa_column_kwargs={"name": "OSFamilyName", "unique": True}, description="운영체제 계열 이름")


class OperatingSystemFamily(RecordBase, OperatingSystemFamilyBase, table=True):
    """
    SQLite의 OperatingSystemFamilies 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "OperatingSystemFamilies"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 2. OperatingSystems 테이블 모델
# =============================================================================
class OperatingSystemBase(SQLModel):
    """
    OperatingSystems 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    os_name: str = Field(sa_column_kwargs={"name": "OSName", "unique": True}, description="운영체제 이름")
    os_family_id: int = Field(
        foreign_key="OperatingSystemFamilies.Id", sa_column_kwargs={"name": "OSFamilyId"}, description="운영체제 계열 ID"
    )
    vendor_id: int = Field(foreign_key="Vendors.Id", sa_column_kwargs={"name": "VendorId"}, description="공급업체 ID")
    os_image_url: str = Field(sa_column_kwargs={"name": "OSImageUrl", "unique": True}, description="설치 이미지 위치")
    image_uri_protocol: str = Field(sa_column_kwargs={"name": "ImageUriProtocol"}, description="이미지 URI 프로토콜 (http, nfs ...)")


class OperatingSystem(RecordBase, OperatingSystemBase, table=True):
    """
    SQLite의 OperatingSystems 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "OperatingSystems"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 3. OperatingSystemVersions 테이블 모델
# =============================================================================
class OperatingSystemVersionBase(SQLModel):
    operating_system_id: int = Field(
        foreign_key="OperatingSystems.Id", sa_column_kwargs={"name": "OperatingSystemId"}, description="운영체제 ID"
    )
    version_number: str = Field(sa_column_kwargs={"name": "VersionNumber"}, description="버전 번호")


class OperatingSystemVersion(RecordBase, OperatingSystemVersionBase, table=True):
    """
    SQLite의 OperatingSystemVersions 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    (OperatingSystemId, VersionNumber) 조합이 고유합니다.
    """
    __tablename__ = "OperatingSystemVersions"
    __table_args__ = (
        UniqueConstraint("OperatingSystemId", "VersionNumber", name="uq_os_version"),
        {"sqlite_autoincrement": True},
    )
