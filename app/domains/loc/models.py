# app/domains/loc/models.py

"""
'loc' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - Building: 시스템이 설치되는 건물/사이트 (시스템이 BuildingId 로 참조)
"""

from sqlmodel import Field, SQLModel

from app.domains.shared.models import RecordBase


# =============================================================================
# 1. Buildings 테이블 모델
# =============================================================================
class BuildingBase(SQLModel):
    """
    Buildings 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    building_name: str = Field(sa_column_kwargs={"name": "BuildingName", "unique": True}, description="건물 이름")
    short_name: str = Field(sa_column_kwargs={"name": "ShortName", "unique": True}, description="건물 약칭")
    city: str = Field(sa_column_kwargs={"name": "City"}, description="도시")
    region: str = Field(sa_column_kwargs={"name": "Region"}, description="지역 (주/도)")


class Building(RecordBase, BuildingBase, table=True):
    """
    SQLite의 Buildings 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "Buildings"
    __table_args__ = {"sqlite_autoincrement": True}
