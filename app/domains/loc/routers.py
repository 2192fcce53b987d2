# app/domains/loc/routers.py

"""
'loc' 도메인의 API 엔드포인트를 정의하는 모듈입니다.

표준 엔드포인트(/building, /buildings ...)는 add_resource_routes 로 등록하고,
건물 약칭 조회만 이 모듈에서 직접 정의합니다.
"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

# 핵심 의존성 (데이터베이스 세션, 사용자 인증 등)
from app.core import dependencies as deps
from app.core.resource_router import add_resource_routes

# 'loc' 도메인의 CRUD, 스키마
from app.domains.loc import crud as loc_crud
from app.domains.loc import schemas as loc_schemas

# 라우터 인스턴스 생성
router = APIRouter(
    tags=["Location Management (위치 관리)"],  # Swagger UI에 표시될 태그
    responses={400: {"description": "Bad request / record not found"}},
)


# =============================================================================
# 1. Buildings 엔드포인트 (건물 관리)
# =============================================================================
add_resource_routes(
    router,
    crud=loc_crud.building,
    create_schema=loc_schemas.BuildingCreate,
    update_schema=loc_schemas.BuildingUpdate,
    read_schema=loc_schemas.BuildingRead,
    singular="building",
    plural="buildings",
)


@router.get(
    "/building/byShortName/{short_name}",
    response_model=loc_schemas.BuildingRead,
    dependencies=[Depends(deps.get_current_user)],
    summary="약칭으로 건물 조회",
)
async def read_building_by_short_name(
    short_name: str,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    건물 약칭(ShortName)으로 건물을 조회합니다 (대소문자 구분, 정확히 일치).
    """
    return await loc_crud.building.get_by_short_name(db, short_name=short_name)
