# tests/domains/test_img.py

"""
'img' 도메인 (운영체제 이미지 카탈로그) 관련 API 엔드포인트에 대한 통합 테스트를 정의하는 모듈입니다.

- 운영체제 계열: `/osFamily`, `/osFamilies`
- 운영체제: `/operatingSystem`, `/operatingSystems`, 계열/공급업체별 목록
- 운영체제 버전: `/osVersion`, `/osVersions`, 운영체제별 목록
"""

from typing import Dict

import pytest
from httpx import AsyncClient


def os_payload(refs: Dict[str, int], name: str = "Ubuntu", url: str = "http://mirror.example.com/ubuntu.iso") -> dict:
    return {
        "OSName": name,
        "OSFamilyId": refs["os_family_id"],
        "VendorId": refs["vendor_id"],
        "OSImageUrl": url,
        "ImageUriProtocol": "http",
    }


@pytest.mark.asyncio
async def test_os_family_crud(admin_client: AsyncClient):
    response = await admin_client.post("/api/v1/osFamily", json={"OSFamilyName": "BSD"})
    assert response.status_code == 200
    assert response.json() == {"message": "OS Family 'BSD' has been added to system"}

    families = (await admin_client.get("/api/v1/osFamilies")).json()["data"]
    assert [f["OSFamilyName"] for f in families] == ["BSD"]

    family_id = families[0]["Id"]
    assert (await admin_client.get("/api/v1/osFamily/byName/BSD")).json()["Id"] == family_id
    assert (await admin_client.delete(f"/api/v1/osFamily/{family_id}")).status_code == 200


@pytest.mark.asyncio
async def test_create_operating_system(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    response = await admin_client.post("/api/v1/operatingSystem", json=os_payload(inventory_refs))
    assert response.status_code == 200
    assert response.json() == {"message": "Operating System 'Ubuntu' has been added to system"}

    created = (await admin_client.get("/api/v1/operatingSystem/byName/Ubuntu")).json()
    assert created["OSFamilyId"] == inventory_refs["os_family_id"]
    assert created["VendorId"] == inventory_refs["vendor_id"]
    assert created["ImageUriProtocol"] == "http"


@pytest.mark.asyncio
async def test_create_operating_system_duplicate_image_url(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    """
    OSImageUrl 도 고유해야 합니다 (conftest 의 Debian 과 같은 이미지 위치).
    """
    payload = os_payload(inventory_refs, url="http://mirror.example.com/debian.iso")
    response = await admin_client.post("/api/v1/operatingSystem", json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == "Conflict"


@pytest.mark.asyncio
async def test_create_operating_system_unknown_family(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    payload = {**os_payload(inventory_refs), "OSFamilyId": 999}
    response = await admin_client.post("/api/v1/operatingSystem", json=payload)
    assert response.status_code == 400
    assert response.json()["error"] == "MalformedRequest"


@pytest.mark.asyncio
async def test_list_operating_systems_by_family_and_vendor(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    await admin_client.post("/api/v1/operatingSystem", json=os_payload(inventory_refs))

    by_family = await admin_client.get(f"/api/v1/operatingSystems/byFamilyId/{inventory_refs['os_family_id']}")
    assert by_family.status_code == 200
    assert [o["OSName"] for o in by_family.json()["data"]] == ["Debian", "Ubuntu"]

    by_vendor = await admin_client.get(f"/api/v1/operatingSystems/byVendorId/{inventory_refs['vendor_id']}")
    assert len(by_vendor.json()["data"]) == 2

    none = await admin_client.get("/api/v1/operatingSystems/byVendorId/999")
    assert none.status_code == 404


@pytest.mark.asyncio
async def test_delete_family_in_use(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    response = await admin_client.delete(f"/api/v1/osFamily/{inventory_refs['os_family_id']}")
    assert response.status_code == 500
    assert response.json()["error"] == "ReferentialConflict"


@pytest.mark.asyncio
async def test_os_versions_unique_within_operating_system(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    """
    VersionNumber 는 같은 운영체제 안에서만 고유합니다.
    """
    debian_id = inventory_refs["operating_system_id"]
    first = await admin_client.post("/api/v1/osVersion", json={"OperatingSystemId": debian_id, "VersionNumber": "12"})
    assert first.status_code == 200
    assert first.json() == {"message": "OS Version '12' has been added to system"}

    duplicate = await admin_client.post("/api/v1/osVersion", json={"OperatingSystemId": debian_id, "VersionNumber": "12"})
    assert duplicate.status_code == 400
    assert duplicate.json()["error"] == "Conflict"

    await admin_client.post("/api/v1/operatingSystem", json=os_payload(inventory_refs))
    ubuntu_id = (await admin_client.get("/api/v1/operatingSystem/byName/Ubuntu")).json()["Id"]
    other_os = await admin_client.post("/api/v1/osVersion", json={"OperatingSystemId": ubuntu_id, "VersionNumber": "12"})
    assert other_os.status_code == 200

    versions = await admin_client.get(f"/api/v1/osVersions/byOSId/{debian_id}")
    assert versions.status_code == 200
    assert [v["VersionNumber"] for v in versions.json()["data"]] == ["12"]


@pytest.mark.asyncio
async def test_os_version_update_into_existing_pair(admin_client: AsyncClient, inventory_refs: Dict[str, int]):
    debian_id = inventory_refs["operating_system_id"]
    await admin_client.post("/api/v1/osVersion", json={"OperatingSystemId": debian_id, "VersionNumber": "11"})
    await admin_client.post("/api/v1/osVersion", json={"OperatingSystemId": debian_id, "VersionNumber": "12"})
    versions = (await admin_client.get(f"/api/v1/osVersions/byOSId/{debian_id}")).json()["data"]

    response = await admin_client.patch(f"/api/v1/osVersion/{versions[0]['Id']}", json={"VersionNumber": "12"})
    assert response.status_code == 400
    assert response.json()["error"] == "Conflict"
