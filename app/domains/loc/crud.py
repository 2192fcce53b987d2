# app/domains/loc/crud.py

"""
'loc' 도메인 (건물/사이트)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from sqlmodel.ext.asyncio.session import AsyncSession

# 공통 CRUDBase 및 LOC 도메인의 모델, 스키마 임포트
from app.core.crud_base import CRUDBase
from . import models as loc_models
from . import schemas as loc_schemas


# =============================================================================
# 1. 건물 (Building) CRUD
# =============================================================================
class CRUDBuilding(
    CRUDBase[
        loc_models.Building,
        loc_schemas.BuildingCreate,
        loc_schemas.BuildingUpdate
    ]
):
    label = "Building"
    name_field = "building_name"
    unique_fields = ("building_name", "short_name")

    def __init__(self):
        super().__init__(model=loc_models.Building)

    async def get_by_short_name(self, db: AsyncSession, *, short_name: str) -> loc_models.Building:
        """건물 약칭으로 조회합니다."""
        return await self.get_by_attribute_or_raise(db, attribute="short_name", value=short_name, key="abbreviation")


building = CRUDBuilding()
