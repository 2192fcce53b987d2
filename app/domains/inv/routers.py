# app/domains/inv/routers.py

"""
'inv' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- 참조 데이터: /architecture, /systemModel, /machineRole
- 시스템: /system (조회 및 /systems/by... 목록은 인증 없이 공개)
- 구성 요소: /networkInterface, /storageVolume (시스템별 목록 포함)
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.resource_router import add_resource_routes
from app.core.schema_base import DataResponse
from app.domains.inv import crud as inv_crud
from app.domains.inv import schemas as inv_schemas

router = APIRouter(
    tags=["Inventory Management (시스템 인벤토리 관리)"],
    responses={400: {"description": "Bad request / record not found"}},
)


# =============================================================================
# 1. 참조 데이터 엔드포인트 (아키텍처, 하드웨어 모델, 머신 역할)
# =============================================================================
add_resource_routes(
    router,
    crud=inv_crud.architecture,
    create_schema=inv_schemas.ArchitectureCreate,
    update_schema=inv_schemas.ArchitectureUpdate,
    read_schema=inv_schemas.ArchitectureRead,
    singular="architecture",
    plural="architectures",
)

add_resource_routes(
    router,
    crud=inv_crud.system_model,
    create_schema=inv_schemas.SystemModelCreate,
    update_schema=inv_schemas.SystemModelUpdate,
    read_schema=inv_schemas.SystemModelRead,
    singular="systemModel",
    plural="systemModels",
)

add_resource_routes(
    router,
    crud=inv_crud.machine_role,
    create_schema=inv_schemas.MachineRoleCreate,
    update_schema=inv_schemas.MachineRoleUpdate,
    read_schema=inv_schemas.MachineRoleRead,
    singular="machineRole",
    plural="machineRoles",
)


# =============================================================================
# 2. 시스템 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=inv_crud.system,
    create_schema=inv_schemas.SystemCreate,
    update_schema=inv_schemas.SystemUpdate,
    read_schema=inv_schemas.SystemRead,
    singular="system",
    plural="systems",
    public_reads=True,
)


@router.get(
    "/system/bySerialNumber/{serial_number}",
    response_model=inv_schemas.SystemRead,
    dependencies=[Depends(deps.get_current_user)],
    summary="일련번호로 시스템 조회",
)
async def read_system_by_serial_number(
    serial_number: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await inv_crud.system.get_by_serial_number(db, serial_number=serial_number)


@router.get("/systems/byVendorId/{vendor_id}", response_model=DataResponse[List[inv_schemas.SystemRead]])
async def read_systems_by_vendor(vendor_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    """공급업체별 시스템 목록 (공개)"""
    return {"data": await inv_crud.system.get_multi_by(db, vendor_id=vendor_id)}


@router.get("/systems/byCpuCores/{cpu_cores}", response_model=DataResponse[List[inv_schemas.SystemRead]])
async def read_systems_by_cpu_cores(cpu_cores: int = deps.count_path("CPU 코어 수"), db: AsyncSession = Depends(deps.get_db_session)):
    """CPU 코어 수가 정확히 일치하는 시스템 목록 (공개)"""
    return {"data": await inv_crud.system.get_multi_by(db, cpu_cores=cpu_cores)}


@router.get("/systems/byRAM/{ram}", response_model=DataResponse[List[inv_schemas.SystemRead]])
async def read_systems_by_ram(ram: int = deps.count_path("RAM 크기"), db: AsyncSession = Depends(deps.get_db_session)):
    """메모리 크기(MiB)가 정확히 일치하는 시스템 목록 (공개)"""
    return {"data": await inv_crud.system.get_multi_by(db, ram=ram)}


@router.get("/systems/byMachineRoleId/{machine_role_id}", response_model=DataResponse[List[inv_schemas.SystemRead]])
async def read_systems_by_machine_role(machine_role_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await inv_crud.system.get_multi_by(db, machine_role_id=machine_role_id)}


@router.get("/systems/byOuId/{ou_id}", response_model=DataResponse[List[inv_schemas.SystemRead]])
async def read_systems_by_org_unit(ou_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    """비용 청구 조직 단위별 시스템 목록 (공개)"""
    return {"data": await inv_crud.system.get_multi_by(db, billed_to_org_unit_id=ou_id)}


# =============================================================================
# 3. 네트워크 인터페이스 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=inv_crud.network_interface,
    create_schema=inv_schemas.NetworkInterfaceCreate,
    update_schema=inv_schemas.NetworkInterfaceUpdate,
    read_schema=inv_schemas.NetworkInterfaceRead,
    singular="networkInterface",
    plural="networkInterfaces",
)


@router.get(
    "/networkInterface/byIpAddress/{ip_address}",
    response_model=inv_schemas.NetworkInterfaceRead,
    dependencies=[Depends(deps.get_current_user)],
)
async def read_network_interface_by_ip(ip_address: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await inv_crud.network_interface.get_by_ip_address(db, ip_address=ip_address)


@router.get(
    "/networkInterface/byMACAddress/{mac_address}",
    response_model=inv_schemas.NetworkInterfaceRead,
    dependencies=[Depends(deps.get_current_user)],
)
async def read_network_interface_by_mac(mac_address: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await inv_crud.network_interface.get_by_mac_address(db, mac_address=mac_address)


@router.get(
    "/networkInterfaces/{system_id}",
    response_model=DataResponse[List[inv_schemas.NetworkInterfaceRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="시스템별 네트워크 인터페이스 목록 조회",
)
async def read_network_interfaces_by_system(system_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await inv_crud.network_interface.get_multi_by_system(db, system_id=system_id)}


# =============================================================================
# 4. 스토리지 볼륨 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=inv_crud.storage_volume,
    create_schema=inv_schemas.StorageVolumeCreate,
    update_schema=inv_schemas.StorageVolumeUpdate,
    read_schema=inv_schemas.StorageVolumeRead,
    singular="storageVolume",
    plural="storageVolumes",
)


@router.get(
    "/storageVolume/{system_id}/byLabel/{volume_label}",
    response_model=inv_schemas.StorageVolumeRead,
    dependencies=[Depends(deps.get_current_user)],
    summary="시스템 안에서 레이블로 스토리지 볼륨 조회",
)
async def read_storage_volume_by_label(
    volume_label: str,
    system_id: int = deps.id_path(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return await inv_crud.storage_volume.get_by_label(db, system_id=system_id, volume_label=volume_label)


@router.get(
    "/storageVolumes/{system_id}",
    response_model=DataResponse[List[inv_schemas.StorageVolumeRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="시스템별 스토리지 볼륨 목록 조회",
)
async def read_storage_volumes_by_system(system_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await inv_crud.storage_volume.get_multi_by_system(db, system_id=system_id)}
