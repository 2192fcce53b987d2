# tests/domains/test_usr_n.py

"""
'usr' 도메인 (사용자, 역할, 조직 단위 관리) 관련 API 엔드포인트에 대한 통합 테스트 모듈입니다.
"""

import hashlib
import re
from typing import Callable

import pytest
from httpx import AsyncClient
from sqlmodel.ext.asyncio.session import AsyncSession

from fastapi import status

from app.domains.usr import models as usr_models
from app.domains.usr import crud as usr_crud
from tests.conftest import ADMIN_USER_NAME

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

ALICE = {
    "UserName": "alice",
    "Password": "s3cret",
    "OrgUnitId": 1,
    "RoleId": 1,
    "FullName": "Alice",
}


async def _fetch_user(db_session: AsyncSession, user_name: str) -> usr_models.User:
    """API 요청이 다른 세션에서 커밋한 값을 다시 읽습니다."""
    db_user = await usr_crud.user.get_by_user_name(db_session, user_name=user_name)
    await db_session.refresh(db_user)
    return db_user


# =============================================================================
# 1. 시드 레코드
# =============================================================================
@pytest.mark.asyncio
async def test_seed_system_user_present(client: AsyncClient):
    """
    빈 저장소로 처음 기동한 뒤 Id 1 의 SYSTEM 사용자가 존재합니다.
    """
    response = await client.get("/api/v1/user/byId/1")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["UserName"] == "SYSTEM"
    assert body["OrgUnitId"] == 1
    assert body["RoleId"] == 1
    assert body["Status"] == "enabled"
    assert "PasswordHash" not in body
    assert TIMESTAMP_PATTERN.match(body["CreationDate"])


@pytest.mark.asyncio
async def test_seed_role_and_org_unit_present(admin_client: AsyncClient):
    role = await admin_client.get("/api/v1/role/byId/1")
    assert role.status_code == 200
    assert role.json()["RoleName"] == "SYSTEM"
    assert role.json()["CreationDate"] == "2024-06-01 14:57:41"

    org_unit = await admin_client.get("/api/v1/organizationalUnit/byName/Unassigned")
    assert org_unit.status_code == 200
    assert org_unit.json()["Id"] == 1


@pytest.mark.asyncio
async def test_seed_records_cannot_be_deleted(admin_client: AsyncClient):
    assert (await admin_client.delete("/api/v1/user/SYSTEM")).status_code == status.HTTP_403_FORBIDDEN
    assert (await admin_client.delete("/api/v1/role/1")).status_code == status.HTTP_403_FORBIDDEN
    response = await admin_client.delete("/api/v1/organizationalUnit/1")
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["error"] == "Forbidden"


# =============================================================================
# 2. 사용자 생성 및 조회
# =============================================================================
@pytest.mark.asyncio
async def test_create_user_public(client: AsyncClient, db_session: AsyncSession):
    """
    계정 생성은 공개 엔드포인트이며, 비밀번호는 hex(SHA-512) 다이제스트로 저장됩니다.
    """
    response = await client.post("/api/v1/user", json=ALICE)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "User has been added to system"}

    db_user = await _fetch_user(db_session, "alice")
    assert db_user.password_hash == hashlib.sha512(b"s3cret").hexdigest()
    assert db_user.status == "enabled"
    assert db_user.creator_id == 1


@pytest.mark.asyncio
async def test_create_user_duplicate_name(client: AsyncClient):
    assert (await client.post("/api/v1/user", json=ALICE)).status_code == 200
    response = await client.post("/api/v1/user", json=ALICE)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Conflict"


@pytest.mark.asyncio
async def test_create_user_blank_name(client: AsyncClient):
    response = await client.post("/api/v1/user", json={**ALICE, "UserName": "   "})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "MalformedRequest"


@pytest.mark.asyncio
async def test_create_user_unknown_role(client: AsyncClient):
    response = await client.post("/api/v1/user", json={**ALICE, "RoleId": 999})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "MalformedRequest"


@pytest.mark.asyncio
async def test_read_user_never_exposes_digest(client: AsyncClient, admin_client: AsyncClient):
    await client.post("/api/v1/user", json=ALICE)

    responses = [
        await client.get("/api/v1/user/alice"),
        await client.get("/api/v1/user/byId/1"),
        await admin_client.get("/api/v1/users"),
        await admin_client.get("/api/v1/users/byOuId/1"),
    ]
    for response in responses:
        assert response.status_code == 200
        assert "PasswordHash" not in response.text


@pytest.mark.asyncio
async def test_read_user_not_found(client: AsyncClient):
    response = await client.get("/api/v1/user/nobody")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "NotFound", "detail": "no records found with user name nobody"}


@pytest.mark.asyncio
async def test_list_users_by_role(admin_client: AsyncClient, admin_user: usr_models.User):
    response = await admin_client.get(f"/api/v1/users/byRoleId/{admin_user.role_id}")
    assert response.status_code == 200
    assert [u["UserName"] for u in response.json()["data"]] == [ADMIN_USER_NAME]

    empty = await admin_client.get("/api/v1/users/byRoleId/999")
    assert empty.status_code == status.HTTP_404_NOT_FOUND
    assert empty.json()["detail"] == "no records found!"


# =============================================================================
# 3. 비밀번호 변경
# =============================================================================
@pytest.mark.asyncio
async def test_password_rotation(client: AsyncClient, authorized_client_factory: Callable):
    await client.post("/api/v1/user", json=ALICE)

    mismatch = await client.patch("/api/v1/user/alice", json={"OldPassword": "wrong", "NewPassword": "x"})
    assert mismatch.status_code == status.HTTP_400_BAD_REQUEST
    assert mismatch.json()["error"] == "PasswordHashMismatch"

    rotated = await client.patch("/api/v1/user/alice", json={"OldPassword": "s3cret", "NewPassword": "n3w"})
    assert rotated.status_code == 200
    assert rotated.json() == {"message": "User 'alice' has changed their password"}

    async with authorized_client_factory("alice", "n3w") as alice_client:
        assert (await alice_client.get("/api/v1/users")).status_code == 200
    async with authorized_client_factory("alice", "s3cret") as old_client:
        assert (await old_client.get("/api/v1/users")).status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_password_change_same_password_is_noop(client: AsyncClient, db_session: AsyncSession):
    await client.post("/api/v1/user", json=ALICE)
    before = await _fetch_user(db_session, "alice")
    digest, changed_at = before.password_hash, before.last_password_changed_date

    response = await client.patch("/api/v1/user/alice", json={"OldPassword": "s3cret", "NewPassword": "s3cret"})
    assert response.status_code == 200

    after = await _fetch_user(db_session, "alice")
    assert after.password_hash == digest
    assert after.last_password_changed_date == changed_at


# =============================================================================
# 4. 계정 상태
# =============================================================================
@pytest.mark.asyncio
async def test_lock_gate(client: AsyncClient, admin_client: AsyncClient, authorized_client_factory: Callable):
    await client.post("/api/v1/user", json=ALICE)

    locked = await admin_client.patch("/api/v1/user/alice/status", json={"Status": "locked"})
    assert locked.status_code == 200
    assert locked.json() == {"message": "User 'alice' has been locked"}

    async with authorized_client_factory("alice", "s3cret") as alice_client:
        response = await alice_client.get("/api/v1/users")
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["error"] == "Forbidden"


@pytest.mark.asyncio
async def test_invalid_status_leaves_status_unchanged(client: AsyncClient, admin_client: AsyncClient):
    await client.post("/api/v1/user", json=ALICE)
    await admin_client.patch("/api/v1/user/alice/status", json={"Status": "locked"})

    response = await admin_client.patch("/api/v1/user/alice/status", json={"Status": "paused"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "InvalidStatusValue"

    current = await admin_client.get("/api/v1/user/alice/status")
    assert current.status_code == 200
    assert current.json() == {"message": "User status: locked", "userStatus": "locked"}


@pytest.mark.asyncio
async def test_unlock_user(client: AsyncClient, admin_client: AsyncClient, authorized_client_factory: Callable):
    await client.post("/api/v1/user", json=ALICE)
    await admin_client.patch("/api/v1/user/alice/status", json={"Status": "locked"})
    await admin_client.patch("/api/v1/user/alice/status", json={"Status": "enabled"})

    async with authorized_client_factory("alice", "s3cret") as alice_client:
        assert (await alice_client.get("/api/v1/users/me")).status_code == 200


# =============================================================================
# 5. 조직 단위 / 역할 배정
# =============================================================================
@pytest.mark.asyncio
async def test_set_user_org_unit(client: AsyncClient, admin_client: AsyncClient):
    await client.post("/api/v1/user", json=ALICE)
    created = await admin_client.post("/api/v1/organizationalUnit", json={"OUName": "lab", "Description": "Lab"})
    assert created.json() == {"message": "Organizational Unit 'lab' has been added to system"}
    ou_id = (await admin_client.get("/api/v1/organizationalUnit/byName/lab")).json()["Id"]

    response = await admin_client.patch("/api/v1/user/alice/ouId", json={"OrgUnitId": ou_id})
    assert response.status_code == 200
    assert response.json()["orgUnitId"] == ou_id
    assert (await client.get("/api/v1/user/alice")).json()["OrgUnitId"] == ou_id

    missing = await admin_client.patch("/api/v1/user/alice/ouId", json={"OrgUnitId": 999})
    assert missing.status_code == status.HTTP_400_BAD_REQUEST
    assert missing.json()["error"] == "NotFound"


@pytest.mark.asyncio
async def test_set_user_role(client: AsyncClient, admin_client: AsyncClient, admin_user: usr_models.User):
    await client.post("/api/v1/user", json=ALICE)
    response = await admin_client.patch("/api/v1/user/alice/roleId", json={"RoleId": admin_user.role_id})
    assert response.status_code == 200
    assert response.json()["roleId"] == admin_user.role_id
    assert (await client.get("/api/v1/user/alice")).json()["RoleId"] == admin_user.role_id


# =============================================================================
# 6. 삭제
# =============================================================================
@pytest.mark.asyncio
async def test_delete_user(client: AsyncClient, admin_client: AsyncClient):
    await client.post("/api/v1/user", json=ALICE)

    response = await admin_client.delete("/api/v1/user/alice")
    assert response.status_code == 200
    assert response.json() == {"message": "User alice has been removed from system"}
    assert (await client.get("/api/v1/user/alice")).status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.asyncio
async def test_delete_user_referenced_as_creator(admin_client: AsyncClient):
    """
    다른 레코드의 CreatorId 로 기록된 사용자는 삭제할 수 없습니다 (500 ReferentialConflict).
    """
    await admin_client.post("/api/v1/vendor", json={"VendorName": "Dell"})

    response = await admin_client.delete(f"/api/v1/user/{ADMIN_USER_NAME}")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "ReferentialConflict"


@pytest.mark.asyncio
async def test_delete_role_referenced_by_user(admin_client: AsyncClient, admin_user: usr_models.User):
    response = await admin_client.delete(f"/api/v1/role/{admin_user.role_id}")
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["error"] == "ReferentialConflict"
    assert (await admin_client.get(f"/api/v1/role/byId/{admin_user.role_id}")).status_code == 200


# =============================================================================
# 7. 역할 CRUD
# =============================================================================
@pytest.mark.asyncio
async def test_role_crud_round_trip(admin_client: AsyncClient, admin_user: usr_models.User):
    created = await admin_client.post("/api/v1/role", json={"RoleName": "operators", "Description": "Ops"})
    assert created.status_code == 200
    assert created.json() == {"message": "Role 'operators' has been added to system"}

    role = (await admin_client.get("/api/v1/role/byName/operators")).json()
    assert role["Description"] == "Ops"
    assert role["CreatorId"] == admin_user.id
    assert TIMESTAMP_PATTERN.match(role["CreationDate"])

    updated = await admin_client.patch(f"/api/v1/role/{role['Id']}", json={"Description": "Operations"})
    assert updated.json() == {"message": f"Role with Id '{role['Id']}' has been updated"}
    after = (await admin_client.get(f"/api/v1/role/byId/{role['Id']}")).json()
    assert after["Description"] == "Operations"
    assert after["RoleName"] == "operators"
    assert after["CreationDate"] == role["CreationDate"]
    assert after["CreatorId"] == role["CreatorId"]

    removed = await admin_client.delete(f"/api/v1/role/{role['Id']}")
    assert removed.json() == {"message": f"Role with Id '{role['Id']}' has been removed from system"}
    assert (await admin_client.get(f"/api/v1/role/byId/{role['Id']}")).status_code == status.HTTP_400_BAD_REQUEST
