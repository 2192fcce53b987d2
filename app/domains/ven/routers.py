# app/domains/ven/routers.py

"""
'ven' 도메인의 API 엔드포인트를 정의하는 모듈입니다.
공급업체는 표준 엔드포인트(/vendor, /vendors ...)만 제공합니다.
"""

from fastapi import APIRouter

from app.core.resource_router import add_resource_routes
from app.domains.ven import crud as ven_crud
from app.domains.ven import schemas as ven_schemas

router = APIRouter(
    tags=["Vendor Management (공급업체 관리)"],
    responses={400: {"description": "Bad request / record not found"}},
)

add_resource_routes(
    router,
    crud=ven_crud.vendor,
    create_schema=ven_schemas.VendorCreate,
    update_schema=ven_schemas.VendorUpdate,
    read_schema=ven_schemas.VendorRead,
    singular="vendor",
    plural="vendors",
)
