# app/domains/usr/routers.py

"""
'usr' 도메인 (사용자, 역할, 조직 단위 관리)과 관련된 API 엔드포인트를 정의하는 모듈입니다.

공개 엔드포인트 (인증 불필요):
- `POST /user` (계정 생성), `PATCH /user/{name}` (비밀번호 변경)
- `GET /user/byId/{id}`, `GET /user/{name}` (계정 조회)

그 외 엔드포인트는 모두 HTTP Basic 인증이 필요합니다.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.resource_router import add_resource_routes
from app.core.schema_base import DataResponse, MessageResponse

# usr 도메인의 CRUD, 모델, 스키마
from . import crud as usr_crud
from . import models as usr_models
from . import schemas as usr_schemas


# 라우터 인스턴스 생성 (prefix는 main.py에서 관리)
router = APIRouter(
    tags=["User Management (사용자 관리)"],  # Swagger UI에 표시될 태그
    responses={400: {"description": "Bad request / record not found"}},  # 이 라우터의 공통 응답 정의
)


# =============================================================================
# 1. 사용자 (User) 엔드포인트 - 공개
# =============================================================================
@router.post("/user", response_model=MessageResponse, summary="새 사용자 등록")
async def create_user(
    user_in: usr_schemas.UserCreate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    새로운 사용자를 생성합니다. 생성자는 SYSTEM 계정으로 기록됩니다.
    - `UserName`: 고유한 로그인 이름 (필수)
    - `Password`: 평문 비밀번호 (다이제스트로 저장)
    """
    await usr_crud.user.create(db, obj_in=user_in)
    return {"message": "User has been added to system"}


@router.patch("/user/{user_name}", response_model=MessageResponse, summary="비밀번호 변경")
async def change_account_password(
    user_name: str,
    password_in: usr_schemas.PasswordChange,
    db: AsyncSession = Depends(deps.get_db_session),
):
    """
    이전 비밀번호를 확인한 뒤 새 비밀번호로 교체합니다.
    이전 비밀번호가 틀리면 400 PasswordHashMismatch 입니다.
    """
    await usr_crud.user.change_password(
        db,
        user_name=user_name,
        old_password=password_in.old_password,
        new_password=password_in.new_password,
    )
    return {"message": f"User '{user_name}' has changed their password"}


@router.get("/user/byId/{user_id}", response_model=usr_schemas.UserRead, summary="Id 로 사용자 조회")
async def read_user_by_id(user_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return await usr_crud.user.get_or_raise(db, user_id)


@router.get("/user/{user_name}", response_model=usr_schemas.UserRead, summary="이름으로 사용자 조회")
async def read_user_by_name(user_name: str, db: AsyncSession = Depends(deps.get_db_session)):
    return await usr_crud.user.get_by_user_name(db, user_name=user_name)


# =============================================================================
# 2. 사용자 (User) 엔드포인트 - 인증 필요
# =============================================================================
@router.get(
    "/users",
    response_model=DataResponse[List[usr_schemas.UserRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="모든 사용자 목록 조회",
)
async def read_users(db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await usr_crud.user.get_multi_or_raise(db)}


@router.get(
    "/users/byOuId/{ou_id}",
    response_model=DataResponse[List[usr_schemas.UserRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="조직 단위별 사용자 목록 조회",
)
async def read_users_by_ou(ou_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await usr_crud.user.get_multi_or_raise(db, org_unit_id=ou_id)}


@router.get(
    "/users/byRoleId/{role_id}",
    response_model=DataResponse[List[usr_schemas.UserRead]],
    dependencies=[Depends(deps.get_current_user)],
    summary="역할별 사용자 목록 조회",
)
async def read_users_by_role(role_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
    return {"data": await usr_crud.user.get_multi_or_raise(db, role_id=role_id)}


@router.get(
    "/user/{user_name}/status",
    response_model=usr_schemas.UserStatusResponse,
    dependencies=[Depends(deps.get_current_user)],
    summary="사용자 계정 상태 조회",
)
async def read_user_status(user_name: str, db: AsyncSession = Depends(deps.get_db_session)):
    user_status = await usr_crud.user.get_status(db, user_name=user_name)
    return {"message": f"User status: {user_status}", "userStatus": user_status}


@router.patch(
    "/user/{user_name}/status",
    response_model=MessageResponse,
    dependencies=[Depends(deps.get_current_user)],
    summary="사용자 계정 상태 변경 (enabled | locked)",
)
async def update_user_status(
    user_name: str,
    status_in: usr_schemas.UserStatusUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    await usr_crud.user.set_status(db, user_name=user_name, status=status_in.status)
    return {"message": f"User '{user_name}' has been {status_in.status}"}


@router.patch(
    "/user/{user_name}/ouId",
    response_model=usr_schemas.UserOrgUnitResponse,
    dependencies=[Depends(deps.get_current_user)],
    summary="사용자 조직 단위 변경",
)
async def update_user_org_unit(
    user_name: str,
    ou_in: usr_schemas.UserOrgUnitUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    await usr_crud.user.set_org_unit(db, user_name=user_name, org_unit_id=ou_in.org_unit_id)
    return {
        "message": f"User '{user_name}' has been moved to organizational unit {ou_in.org_unit_id}",
        "orgUnitId": ou_in.org_unit_id,
    }


@router.patch(
    "/user/{user_name}/roleId",
    response_model=usr_schemas.UserRoleResponse,
    dependencies=[Depends(deps.get_current_user)],
    summary="사용자 역할 변경",
)
async def update_user_role(
    user_name: str,
    role_in: usr_schemas.UserRoleUpdate,
    db: AsyncSession = Depends(deps.get_db_session),
):
    await usr_crud.user.set_role(db, user_name=user_name, role_id=role_in.role_id)
    return {
        "message": f"User '{user_name}' has been assigned role {role_in.role_id}",
        "roleId": role_in.role_id,
    }


@router.delete(
    "/user/{user_name}",
    response_model=MessageResponse,
    dependencies=[Depends(deps.get_current_user)],
    summary="사용자 삭제",
)
async def delete_user(user_name: str, db: AsyncSession = Depends(deps.get_db_session)):
    """
    사용자를 삭제합니다. 다른 레코드의 생성자로 기록된 사용자는 삭제할 수 없습니다 (500 ReferentialConflict).
    """
    await usr_crud.user.remove_by_user_name(db, user_name=user_name)
    return {"message": f"User {user_name} has been removed from system"}


# =============================================================================
# 3. 역할 (Role) / 조직 단위 (OrganizationalUnit) 엔드포인트
# =============================================================================
add_resource_routes(
    router,
    crud=usr_crud.role,
    create_schema=usr_schemas.RoleCreate,
    update_schema=usr_schemas.RoleUpdate,
    read_schema=usr_schemas.RoleRead,
    singular="role",
    plural="roles",
)

add_resource_routes(
    router,
    crud=usr_crud.organizational_unit,
    create_schema=usr_schemas.OrganizationalUnitCreate,
    update_schema=usr_schemas.OrganizationalUnitUpdate,
    read_schema=usr_schemas.OrganizationalUnitRead,
    singular="organizationalUnit",
    plural="organizationalUnits",
)


# 현재 인증된 사용자 정보 (운영 편의용)
@router.get("/users/me", response_model=usr_schemas.UserRead, summary="현재 사용자 정보 조회")
async def read_users_me(current_user: usr_models.User = Depends(deps.get_current_user)):
    return current_user
