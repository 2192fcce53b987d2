# app/core/resource_router.py

"""
레지스트리 리소스의 표준 엔드포인트 묶음을 APIRouter 에 등록하는 모듈입니다.

모든 자산 테이블은 같은 다섯 가지 작업을 제공합니다.

| 작업            | 메서드 | 경로                        | 성공                    |
|-----------------|--------|-----------------------------|-------------------------|
| 생성            | POST   | /{singular}                 | 200 {"message"}         |
| 전체 목록       | GET    | /{plural}                   | 200 {"data": [...]}     |
| Id 조회         | GET    | /{singular}/byId/{id}       | 200 {레코드}            |
| 이름 조회       | GET    | /{singular}/byName/{name}   | 200 {레코드}            |
| Id 로 수정      | PATCH  | /{singular}/{id}            | 200 {"message"}         |
| Id 로 삭제      | DELETE | /{singular}/{id}            | 200 {"message"}         |

도메인 라우터는 이 함수를 호출한 뒤 보조 키 조회 등 고유 엔드포인트만 직접 추가합니다.
"""

from typing import Any, List, Type

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core import dependencies as deps
from app.core.crud_base import CRUDBase
from app.core.schema_base import DataResponse, MessageResponse, RecordRead, RequestSchema
from app.domains.usr.models import User as UsrUser


def add_resource_routes(
    router: APIRouter,
    *,
    crud: CRUDBase,
    create_schema: Type[RequestSchema],
    update_schema: Type[RequestSchema],
    read_schema: Type[RecordRead],
    singular: str,
    plural: str,
    public_reads: bool = False,
) -> None:
    """
    `crud` 리소스에 대한 표준 엔드포인트를 `router` 에 등록합니다.
    - `public_reads`: True 이면 조회 엔드포인트는 인증 없이 접근할 수 있습니다.
    """
    label = crud.label
    read_dependencies: List[Any] = [] if public_reads else [Depends(deps.get_current_user)]

    @router.post(f"/{singular}", response_model=MessageResponse, summary=f"새 {label} 등록", name=f"create_{singular}")
    async def create_item(
        obj_in: create_schema,  # type: ignore[valid-type]
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: UsrUser = Depends(deps.get_current_user),
    ):
        db_obj = await crud.create(db, obj_in=obj_in, creator_id=current_user.id)
        return {"message": f"{label} '{crud.display_name(db_obj)}' has been added to system"}

    @router.get(
        f"/{plural}",
        response_model=DataResponse[List[read_schema]],  # type: ignore[valid-type]
        dependencies=read_dependencies,
        summary=f"모든 {label} 목록 조회",
        name=f"list_{plural}",
    )
    async def read_items(db: AsyncSession = Depends(deps.get_db_session)):
        return {"data": await crud.get_multi_or_raise(db)}

    @router.get(
        f"/{singular}/byId/{{item_id}}",
        response_model=read_schema,
        dependencies=read_dependencies,
        summary=f"Id 로 {label} 조회",
        name=f"get_{singular}_by_id",
    )
    async def read_item(item_id: int = deps.id_path(), db: AsyncSession = Depends(deps.get_db_session)):
        return await crud.get_or_raise(db, item_id)

    if crud.name_field:
        @router.get(
            f"/{singular}/byName/{{name}}",
            response_model=read_schema,
            dependencies=read_dependencies,
            summary=f"이름으로 {label} 조회",
            name=f"get_{singular}_by_name",
        )
        async def read_item_by_name(name: str, db: AsyncSession = Depends(deps.get_db_session)):
            return await crud.get_by_name(db, name=name)

    @router.patch(f"/{singular}/{{item_id}}", response_model=MessageResponse, summary=f"{label} 수정", name=f"update_{singular}")
    async def update_item(
        obj_in: update_schema,  # type: ignore[valid-type]
        item_id: int = deps.id_path(),
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: UsrUser = Depends(deps.get_current_user),
    ):
        db_obj = await crud.get_or_raise(db, item_id)
        await crud.update(db, db_obj=db_obj, obj_in=obj_in)
        return {"message": f"{label} with Id '{item_id}' has been updated"}

    @router.delete(f"/{singular}/{{item_id}}", response_model=MessageResponse, summary=f"{label} 삭제", name=f"delete_{singular}")
    async def delete_item(
        item_id: int = deps.id_path(),
        db: AsyncSession = Depends(deps.get_db_session),
        current_user: UsrUser = Depends(deps.get_current_user),
    ):
        await crud.remove(db, id=item_id)
        return {"message": f"{label} with Id '{item_id}' has been removed from system"}
