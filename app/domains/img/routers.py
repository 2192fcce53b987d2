# app/domains/img/routers.py

"""
'img' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

- /osFamily, /osFamilies: 운영체제 계열
- /operatingSystem, /operatingSystems: 운영체제 (계열/공급업체별 목록 포함)
- /osVersion, /osVersions: 운영체제 버전 (운영체제별 목록 포함)
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.resource_router import add_resource_routes
from app.core.schema_base import DataResponse
from app.domains.img import crud as img_crud
from app.domains.img import schemas as img_schemas

router = APIRouter(
    tags=["OS Image Catalog (운영체제 이미지 관리)"],
    responses={400: {"description": "Bad request / record not found"}},
)


# =============================================================================
# 1. 운영체제 계열 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=img_crud.os_family,
    create_schema=img_schemas.OperatingSystemFamilyCreate,
    update_schema=img_schemas.OperatingSystemFamilyUpdate,
    read_schema=img_schemas.OperatingSystemFamilyRead,
    singular="osFamily",
    plural="osFamilies",
)


# =============================================================================
# 2. 운영체제 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=img_crud.operating_system,
    create_schema=img_schemas.OperatingSystemCreate,
    update_schema=img_schemas.OperatingSystemUpdate,
    read_schema=img_schemas.OperatingSystemRead,
    singular="operatingSystem",
    plural="operatingSystems",
)


@router.get(
    "/operatingSystems/byFamilyId/{family_id}",
    response_model=DataResponse[List[img_schemas.OperatingSystemRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="운영체제 계열별 운영체제 목록 조회",
)
async def read_operating_systems_by_family(
    family_id: int = deps.id_path(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return {"data": await img_crud.operating_system.get_multi_by_family(db, os_family_id=family_id)}


@router.get(
    "/operatingSystems/byVendorId/{vendor_id}",
    response_model=DataResponse[List[img_schemas.OperatingSystemRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="공급업체별 운영체제 목록 조회",
)
async def read_operating_systems_by_vendor(
    vendor_id: int = deps.id_path(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return {"data": await img_crud.operating_system.get_multi_by_vendor(db, vendor_id=vendor_id)}


# =============================================================================
# 3. 운영체제 버전 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=img_crud.os_version,
    create_schema=img_schemas.OperatingSystemVersionCreate,
    update_schema=img_schemas.OperatingSystemVersionUpdate,
    read_schema=img_schemas.OperatingSystemVersionRead,
    singular="osVersion",
    plural="osVersions",
)


@router.get(
    "/osVersions/byOSId/{os_id}",
    response_model=DataResponse[List[img_schemas.OperatingSystemVersionRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="운영체제별 버전 목록 조회",
)
async def read_os_versions_by_os(
    os_id: int = deps.id_path(),
    db: AsyncSession = Depends(deps.get_db_session),
):
    return {"data": await img_crud.os_version.get_multi_by_operating_system(db, operating_system_id=os_id)}
