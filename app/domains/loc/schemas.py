# app/domains/loc/schemas.py

"""
'loc' 도메인의 Pydantic 스키마를 정의하는 모듈입니다.

건물/사이트 데이터에 대한 API 요청(생성, 업데이트) 및 응답(조회)에 사용됩니다.
"""

from typing import Optional

from sqlmodel import Field

from app.core.schema_base import RecordRead, RequestSchema


# =============================================================================
# 1. Buildings 스키마
# =============================================================================
class BuildingCreate(RequestSchema):
    """
    새로운 건물을 등록하기 위한 모델입니다. 모든 필드가 필수입니다.
    """
    building_name: str = Field(..., alias="BuildingName", min_length=1, description="건물 이름")
    short_name: str = Field(..., alias="ShortName", min_length=1, description="건물 약칭")
    city: str = Field(..., alias="City", description="도시")
    region: str = Field(..., alias="Region", description="지역")


class BuildingUpdate(RequestSchema):
    """
    기존 건물 정보를 업데이트하기 위한 모델입니다.
    모든 필드는 선택 사항입니다 (부분 업데이트 가능).
    """
    building_name: Optional[str] = Field(None, alias="BuildingName", min_length=1)
    short_name: Optional[str] = Field(None, alias="ShortName", min_length=1)
    city: Optional[str] = Field(None, alias="City")
    region: Optional[str] = Field(None, alias="Region")


class BuildingRead(RecordRead):
    building_name: str = Field(..., alias="BuildingName")
    short_name: str = Field(..., alias="ShortName")
    city: str = Field(..., alias="City")
    region: str = Field(..., alias="Region")
