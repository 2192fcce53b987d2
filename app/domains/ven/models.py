# app/domains/ven/models.py

"""
'ven' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - Vendor: 하드웨어/운영체제 공급업체 (System, OperatingSystem 이 VendorId 로 참조)
"""

from sqlmodel import Field, SQLModel

from app.domains.shared.models import RecordBase


class VendorBase(SQLModel):
    """
    Vendors 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    vendor_name: str = Field(sa_column_kwargs={"name": "VendorName", "unique": True}, description="공급업체 이름")


class Vendor(RecordBase, VendorBase, table=True):
    """
    SQLite의 Vendors 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "Vendors"
    __table_args__ = {"sqlite_autoincrement": True}
