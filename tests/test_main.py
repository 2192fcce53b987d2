# tests/test_main.py

"""
FastAPI 애플리케이션의 메인 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 헬스 체크 엔드포인트 (`/`, `/api/v1/health`)를 테스트합니다.
- 공통 오류 봉투 ({"error", "detail"})가 프레임워크 오류에도 적용되는지 테스트합니다.
- 저장소 INTEGER 범위를 벗어난 정수가 400 MalformedRequest 로 거부되는지 테스트합니다.
"""

import pytest
from httpx import AsyncClient

import app as app_package

# conftest.py에서 정의된 'client' 픽스처를 Pytest가 자동으로 감지하여 사용할 수 있습니다.


@pytest.mark.asyncio
async def test_read_root(client: AsyncClient):
    """
    루트 엔드포인트 (`GET /`)가 헬스 체크와 같은 응답을 반환하는지 테스트합니다.
    """
    response = await client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """
    헬스 체크 엔드포인트는 인증 없이 데이터베이스 연결 상태를 반환합니다.
    """
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database_connection": "successful"}


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/api/v1/doesNotExist")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "NotFound"
    assert "detail" in body


@pytest.mark.asyncio
async def test_malformed_json_is_rejected_with_400(admin_client: AsyncClient):
    """
    JSON 이 아닌 본문은 400 MalformedRequest 로 거부됩니다 (422 아님).
    """
    response = await admin_client.post(
        "/api/v1/vendor",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


# =============================================================================
# 저장소 INTEGER 범위를 벗어난 정수
# =============================================================================
OUT_OF_RANGE = "99999999999999999999"


@pytest.mark.asyncio
async def test_out_of_range_id_in_path_is_malformed(client: AsyncClient, admin_client: AsyncClient):
    """
    64비트 범위를 넘는 Id 는 저장소에 전달되지 않고 400 MalformedRequest 로 거부됩니다.
    """
    public = await client.get(f"/api/v1/user/byId/{OUT_OF_RANGE}")
    assert public.status_code == 400
    assert public.json()["error"] == "MalformedRequest"

    for path in (
        f"/api/v1/vendor/byId/{OUT_OF_RANGE}",
        f"/api/v1/systems/byCpuCores/{OUT_OF_RANGE}",
        f"/api/v1/storageVolumes/{OUT_OF_RANGE}",
    ):
        response = await admin_client.get(path)
        assert response.status_code == 400, path
        assert response.json()["error"] == "MalformedRequest"

    delete = await admin_client.delete(f"/api/v1/vendor/{OUT_OF_RANGE}")
    assert delete.status_code == 400
    assert delete.json()["error"] == "MalformedRequest"


@pytest.mark.asyncio
async def test_zero_id_in_path_is_malformed(admin_client: AsyncClient):
    response = await admin_client.get("/api/v1/building/byId/0")
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


@pytest.mark.asyncio
async def test_out_of_range_id_in_body_is_malformed(admin_client: AsyncClient, inventory_refs):
    """
    본문의 참조 Id 가 범위를 벗어나도 오류 봉투로 응답합니다.
    """
    response = await admin_client.post(
        "/api/v1/storageVolume",
        json={
            "VolumeName": "root-vol",
            "StorageType": "nvme",
            "DeviceModel": "PM983",
            "DeviceId": "/dev/nvme0n1",
            "MountPoint": "/",
            "VolumeSize": 960,
            "VolumeFormat": "ext4",
            "VolumeLabel": "root",
            "SystemId": int(OUT_OF_RANGE),
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


# =============================================================================
# API 문서와 패키지 메타데이터
# =============================================================================
@pytest.mark.asyncio
async def test_openapi_documents_error_envelope(client: AsyncClient):
    schema = (await client.get("/openapi.json")).json()
    assert "ErrorResponse" in schema["components"]["schemas"]

    responses = schema["paths"]["/api/v1/vendor/byId/{item_id}"]["get"]["responses"]
    assert responses["400"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")


def test_package_metadata():
    assert app_package.__version__ == app_package.APP_VERSION
    assert not hasattr(app_package, "__license__")
