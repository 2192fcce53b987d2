# tests/conftest.py

from typing import AsyncGenerator, Callable, Dict
from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel.ext.asyncio.session import AsyncSession

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app
# app.core.database에서 get_session 및 엔진/초기화 함수 임포트
from app.core.database import SYSTEM_USER_ID, build_engine, build_session_factory, get_session, init_database

# --- 도메인 CRUD/스키마 임포트 (테스트 데이터 준비용) ---
from app.domains.usr import crud as usr_crud
from app.domains.usr import models as usr_models
from app.domains.usr import schemas as usr_schemas
from app.domains.loc import crud as loc_crud
from app.domains.loc import schemas as loc_schemas
from app.domains.ven import crud as ven_crud
from app.domains.ven import schemas as ven_schemas
from app.domains.img import crud as img_crud
from app.domains.img import schemas as img_schemas
from app.domains.inv import crud as inv_crud
from app.domains.inv import schemas as inv_schemas

API = "/api/v1"

ADMIN_USER_NAME = "admin"
ADMIN_PASSWORD = "adminpass123"


# --- 테스트용 데이터베이스 설정 ---
# 테스트마다 임시 디렉터리에 새 SQLite 파일을 만들어 완전히 격리합니다.
@pytest_asyncio.fixture(scope="function")
async def db_path(tmp_path) -> str:
    return str(tmp_path / "allocator-test.db")


@pytest_asyncio.fixture(scope="function")
async def test_engine(db_path: str) -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 전용 엔진을 만들고 스키마와 시드 레코드(SYSTEM 사용자/역할, Unassigned OU)를 생성합니다.
    """
    engine = build_engine(db_path)
    await init_database(db_path, bind=engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """
    테스트 데이터 준비 및 저장소 상태 확인에 쓰이는 세션입니다.
    API 요청은 별도의 세션을 사용하므로, 요청 후 상태를 확인할 때는 새 쿼리로 다시 읽어야 합니다.
    """
    session_factory = build_session_factory(test_engine)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(test_engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """
    인증 정보 없이 요청하는 AsyncClient 입니다.
    get_session 을 테스트 엔진의 세션으로 오버라이드하며 (deps.get_db_session 은 같은 함수의 별칭),
    요청마다 새 세션을 사용합니다.
    """
    session_factory = build_session_factory(test_engine)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides[get_session] = override_get_session
    try:
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as async_client:
            yield async_client
    finally:
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)


# --- 사용자 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def admin_role(db_session: AsyncSession) -> usr_models.Role:
    return await usr_crud.role.create(
        db_session,
        obj_in=usr_schemas.RoleCreate(role_name="administrators", description="Full administrative rights"),
        creator_id=SYSTEM_USER_ID,
    )


@pytest_asyncio.fixture(scope="function")
def user_factory(db_session: AsyncSession) -> Callable:
    """
    이름/비밀번호/역할을 지정하여 테스트 사용자를 생성하는 팩토리 함수를 반환합니다.
    """
    async def _create_user(user_name: str, password: str, role_id: int, org_unit_id: int = 1, **kwargs) -> usr_models.User:
        return await usr_crud.user.create(
            db_session,
            obj_in=usr_schemas.UserCreate(
                user_name=user_name,
                full_name=kwargs.pop("full_name", user_name.title()),
                password=password,
                org_unit_id=org_unit_id,
                role_id=role_id,
            ),
            creator_id=kwargs.pop("creator_id", SYSTEM_USER_ID),
        )
    return _create_user


@pytest_asyncio.fixture(scope="function")
async def admin_user(user_factory: Callable, admin_role: usr_models.Role) -> usr_models.User:
    """관리자 계정을 생성합니다."""
    return await user_factory(ADMIN_USER_NAME, ADMIN_PASSWORD, role_id=admin_role.id, full_name="Administrator")


# --- 인증 클라이언트 픽스처 ---
# HTTP Basic 자격 증명을 기본 헤더로 가진 클라이언트를 만듭니다.
@pytest_asyncio.fixture(scope="function")
def authorized_client_factory(client: AsyncClient) -> Callable:
    """
    특정 사용자 이름/비밀번호로 인증하는 AsyncClient 를 만드는 팩토리를 반환합니다.
    의존성 오버라이드는 `client` 픽스처가 이미 설정했으므로 같은 앱/전송 계층을 공유합니다.
    """
    @asynccontextmanager
    async def _create_client_context(user_name: str, password: str) -> AsyncGenerator[AsyncClient, None]:
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test", auth=(user_name, password)) as async_client:
            yield async_client

    return _create_client_context


@pytest_asyncio.fixture(scope="function")
async def admin_client(
    authorized_client_factory: Callable,
    admin_user: usr_models.User,
) -> AsyncGenerator[AsyncClient, None]:
    """관리자로 인증된 클라이언트를 반환합니다."""
    async with authorized_client_factory(ADMIN_USER_NAME, ADMIN_PASSWORD) as async_client:
        yield async_client


# --- 인벤토리 참조 데이터 픽스처 ---
@pytest_asyncio.fixture(scope="function")
async def inventory_refs(db_session: AsyncSession, admin_user: usr_models.User) -> Dict[str, int]:
    """
    시스템 생성에 필요한 참조 레코드(건물, 공급업체, 운영체제, 모델, 머신 역할, 아키텍처)를 만들고
    그 Id 를 반환합니다.
    """
    creator = admin_user.id
    building = await loc_crud.building.create(
        db_session,
        obj_in=loc_schemas.BuildingCreate(building_name="Main", short_name="MN", city="Austin", region="TX"),
        creator_id=creator,
    )
    vendor = await ven_crud.vendor.create(
        db_session, obj_in=ven_schemas.VendorCreate(vendor_name="Dell"), creator_id=creator
    )
    family = await img_crud.os_family.create(
        db_session, obj_in=img_schemas.OperatingSystemFamilyCreate(os_family_name="Linux"), creator_id=creator
    )
    operating_system = await img_crud.operating_system.create(
        db_session,
        obj_in=img_schemas.OperatingSystemCreate(
            os_name="Debian",
            os_family_id=family.id,
            vendor_id=vendor.id,
            os_image_url="http://mirror.example.com/debian.iso",
            image_uri_protocol="http",
        ),
        creator_id=creator,
    )
    system_model = await inv_crud.system_model.create(
        db_session, obj_in=inv_schemas.SystemModelCreate(model_name="R740"), creator_id=creator
    )
    machine_role = await inv_crud.machine_role.create(
        db_session,
        obj_in=inv_schemas.MachineRoleCreate(machine_role_name="compute", description="Compute node"),
        creator_id=creator,
    )
    architecture = await inv_crud.architecture.create(
        db_session, obj_in=inv_schemas.ArchitectureCreate(ise_name="x86_64", register_size=64), creator_id=creator
    )
    return {
        "building_id": building.id,
        "vendor_id": vendor.id,
        "os_family_id": family.id,
        "operating_system_id": operating_system.id,
        "model_id": system_model.id,
        "machine_role_id": machine_role.id,
        "architecture_id": architecture.id,
    }


def system_payload(refs: Dict[str, int], serial_number: str = "SN-0001", **overrides) -> dict:
    """시스템 생성 요청 본문 (PascalCase 키)"""
    payload = {
        "SerialNumber": serial_number,
        "ModelId": refs["model_id"],
        "OperatingSystemId": refs["operating_system_id"],
        "Reimage": False,
        "HostVars": "",
        "BilledToOrgUnitId": 1,
        "MachineRoleId": refs["machine_role_id"],
        "BuildingId": refs["building_id"],
        "VendorId": refs["vendor_id"],
        "ArchitectureId": refs["architecture_id"],
        "RAM": 65536,
        "CPUCores": 32,
    }
    payload.update(overrides)
    return payload
