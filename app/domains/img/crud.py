# app/domains/img/crud.py

"""
'img' 도메인 (운영체제 계열, 운영체제, 버전)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.ven import models as ven_models
from . import models as img_models
from . import schemas as img_schemas


# =============================================================================
# 1. 운영체제 계열 CRUD
# =============================================================================
class CRUDOperatingSystemFamily(
    CRUDBase[
        img_models.OperatingSystemFamily,
        img_schemas.OperatingSystemFamilyCreate,
        img_schemas.OperatingSystemFamilyUpdate,
    ]
):
    label = "OS Family"
    name_field = "os_family_name"
    unique_fields = ("os_family_name",)

    def __init__(self):
        super().__init__(model=img_models.OperatingSystemFamily)


os_family = CRUDOperatingSystemFamily()


# =============================================================================
# 2. 운영체제 CRUD
# =============================================================================
class CRUDOperatingSystem(
    CRUDBase[
        img_models.OperatingSystem,
        img_schemas.OperatingSystemCreate,
        img_schemas.OperatingSystemUpdate,
    ]
):
    label = "Operating System"
    name_field = "os_name"
    unique_fields = ("os_name", "os_image_url")
    references = {
        "os_family_id": img_models.OperatingSystemFamily,
        "vendor_id": ven_models.Vendor,
    }

    def __init__(self):
        super().__init__(model=img_models.OperatingSystem)

    async def get_multi_by_family(self, db: AsyncSession, *, os_family_id: int) -> List[img_models.OperatingSystem]:
        return await self.get_multi_or_raise(db, os_family_id=os_family_id)

    async def get_multi_by_vendor(self, db: AsyncSession, *, vendor_id: int) -> List[img_models.OperatingSystem]:
        return await self.get_multi_or_raise(db, vendor_id=vendor_id)


operating_system = CRUDOperatingSystem()


# =============================================================================
# 3. 운영체제 버전 CRUD
# =============================================================================
class CRUDOperatingSystemVersion(
    CRUDBase[
        img_models.OperatingSystemVersion,
        img_schemas.OperatingSystemVersionCreate,
        img_schemas.OperatingSystemVersionUpdate,
    ]
):
    label = "OS Version"
    display_field = "version_number"
    unique_together = (("operating_system_id", "version_number"),)
    references = {"operating_system_id": img_models.OperatingSystem}

    def __init__(self):
        super().__init__(model=img_models.OperatingSystemVersion)

    async def get_multi_by_operating_system(
        self, db: AsyncSession, *, operating_system_id: int
    ) -> List[img_models.OperatingSystemVersion]:
        """운영체제 하나에 속한 버전 목록 (VersionNumber 는 운영체제 안에서 고유)"""
        return await self.get_multi_or_raise(db, operating_system_id=operating_system_id)


os_version = CRUDOperatingSystemVersion()
