# app/domains/inv/crud.py

"""
'inv' 도메인 (시스템 인벤토리)과 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Any, List

from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.crud_base import CRUDBase
from app.domains.img import models as img_models
from app.domains.loc import models as loc_models
from app.domains.usr import models as usr_models
from app.domains.ven import models as ven_models
from . import models as inv_models
from . import schemas as inv_schemas


# =============================================================================
# 1. 아키텍처 CRUD
# =============================================================================
class CRUDArchitecture(CRUDBase[inv_models.Architecture, inv_schemas.ArchitectureCreate, inv_schemas.ArchitectureUpdate]):
    label = "Architecture"
    name_field = "ise_name"
    unique_fields = ("ise_name",)

    def __init__(self):
        super().__init__(model=inv_models.Architecture)


architecture = CRUDArchitecture()


# =============================================================================
# 2. 하드웨어 모델 CRUD
# =============================================================================
class CRUDSystemModel(CRUDBase[inv_models.SystemModel, inv_schemas.SystemModelCreate, inv_schemas.SystemModelUpdate]):
    label = "System Model"
    name_field = "model_name"
    unique_fields = ("model_name",)

    def __init__(self):
        super().__init__(model=inv_models.SystemModel)


system_model = CRUDSystemModel()


# =============================================================================
# 3. 머신 역할 CRUD
# =============================================================================
class CRUDMachineRole(CRUDBase[inv_models.MachineRole, inv_schemas.MachineRoleCreate, inv_schemas.MachineRoleUpdate]):
    label = "Machine Role"
    name_field = "machine_role_name"
    unique_fields = ("machine_role_name",)

    def __init__(self):
        super().__init__(model=inv_models.MachineRole)


machine_role = CRUDMachineRole()


# =============================================================================
# 4. 시스템 CRUD
# =============================================================================
class CRUDSystem(CRUDBase[inv_models.System, inv_schemas.SystemCreate, inv_schemas.SystemUpdate]):
    """
    시스템은 일곱 개의 참조 테이블을 가리키며, 생성/수정 시 모든 참조가 실제 레코드인지 검사합니다.
    네트워크 인터페이스나 스토리지 볼륨이 남아 있는 시스템은 삭제되지 않습니다.
    """
    label = "System"
    display_field = "serial_number"
    unique_fields = ("serial_number",)
    references = {
        "model_id": inv_models.SystemModel,
        "operating_system_id": img_models.OperatingSystem,
        "billed_to_org_unit_id": usr_models.OrganizationalUnit,
        "machine_role_id": inv_models.MachineRole,
        "building_id": loc_models.Building,
        "vendor_id": ven_models.Vendor,
        "architecture_id": inv_models.Architecture,
    }

    def __init__(self):
        super().__init__(model=inv_models.System)

    async def get_by_serial_number(self, db: AsyncSession, *, serial_number: str) -> inv_models.System:
        return await self.get_by_attribute_or_raise(db, attribute="serial_number", value=serial_number, key="serial number")

    async def get_multi_by(self, db: AsyncSession, **filters: Any) -> List[inv_models.System]:
        """
        단일 속성 필터로 시스템 목록을 조회합니다 (예: vendor_id=3, cpu_cores=8).
        결과가 없으면 404 'no records found!' 입니다.
        """
        return await self.get_multi_or_raise(db, **filters)


system = CRUDSystem()


# =============================================================================
# 5. 네트워크 인터페이스 CRUD
# =============================================================================
class CRUDNetworkInterface(
    CRUDBase[
        inv_models.NetworkInterface,
        inv_schemas.NetworkInterfaceCreate,
        inv_schemas.NetworkInterfaceUpdate,
    ]
):
    label = "Network Interface"
    display_field = "mac_address"
    unique_fields = ("mac_address",)
    references = {"system_id": inv_models.System}

    def __init__(self):
        super().__init__(model=inv_models.NetworkInterface)

    async def get_by_ip_address(self, db: AsyncSession, *, ip_address: str) -> inv_models.NetworkInterface:
        return await self.get_by_attribute_or_raise(db, attribute="ip_address", value=ip_address, key="ip address")

    async def get_by_mac_address(self, db: AsyncSession, *, mac_address: str) -> inv_models.NetworkInterface:
        return await self.get_by_attribute_or_raise(db, attribute="mac_address", value=mac_address, key="mac address")

    async def get_multi_by_system(self, db: AsyncSession, *, system_id: int) -> List[inv_models.NetworkInterface]:
        return await self.get_multi_or_raise(db, system_id=system_id)


network_interface = CRUDNetworkInterface()


# =============================================================================
# 6. 스토리지 볼륨 CRUD
# =============================================================================
class CRUDStorageVolume(
    CRUDBase[
        inv_models.StorageVolume,
        inv_schemas.StorageVolumeCreate,
        inv_schemas.StorageVolumeUpdate,
    ]
):
    label = "Storage Volume"
    display_field = "volume_name"
    references = {"system_id": inv_models.System}

    def __init__(self):
        super().__init__(model=inv_models.StorageVolume)

    async def get_by_label(self, db: AsyncSession, *, system_id: int, volume_label: str) -> inv_models.StorageVolume:
        """
        시스템 하나 안에서 볼륨 레이블로 조회합니다.
        레이블은 시스템마다 다를 수 있으므로 항상 SystemId 와 함께 검색합니다.
        """
        if not volume_label.strip():
            raise self.not_found("label", "''")
        volumes = await self.get_multi(db, system_id=system_id, volume_label=volume_label)
        if not volumes:
            raise self.not_found("label", volume_label)
        return volumes[0]

    async def get_multi_by_system(self, db: AsyncSession, *, system_id: int) -> List[inv_models.StorageVolume]:
        return await self.get_multi_or_raise(db, system_id=system_id)


storage_volume = CRUDStorageVolume()
