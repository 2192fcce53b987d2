# app/domains/ven/schemas.py

"""
'ven' 도메인 (공급업체 관리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.
"""

from typing import Optional

from sqlmodel import Field

from app.core.schema_base import RecordRead, RequestSchema


class VendorCreate(RequestSchema):
    vendor_name: str = Field(..., alias="VendorName", min_length=1, description="공급업체 이름")


class VendorUpdate(RequestSchema):
    vendor_name: Optional[str] = Field(None, alias="VendorName", min_length=1)


class VendorRead(RecordRead):
    vendor_name: str = Field(..., alias="VendorName")
