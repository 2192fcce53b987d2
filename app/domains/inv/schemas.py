# app/domains/inv/schemas.py

"""
'inv' 도메인 (시스템 인벤토리)의 API 데이터 전송 객체(DTO)를 정의하는 모듈입니다.

생성 스키마의 모든 필수 필드가 누락되면 요청은 400 MalformedRequest 로 거부되며,
수정 스키마는 모든 필드가 선택 사항인 부분 업데이트 모델입니다.
"""

from typing import Optional

from sqlmodel import Field

from app.core.schema_base import RecordRead, RequestSchema

IPV4_BITMASK_MAX = 32


# =============================================================================
# 1. 아키텍처 (Architecture) 스키마
# =============================================================================
class ArchitectureCreate(RequestSchema):
    ise_name: str = Field(..., alias="ISEName", min_length=1, description="명령어 집합 이름")
    register_size: int = Field(..., alias="RegisterSize", gt=0, description="레지스터 크기 (비트, 양수)")


class ArchitectureUpdate(RequestSchema):
    ise_name: Optional[str] = Field(None, alias="ISEName", min_length=1)
    register_size: Optional[int] = Field(None, alias="RegisterSize", gt=0)


class ArchitectureRead(RecordRead):
    ise_name: str = Field(..., alias="ISEName")
    register_size: int = Field(..., alias="RegisterSize")


# =============================================================================
# 2. 하드웨어 모델 (SystemModel) 스키마
# =============================================================================
class SystemModelCreate(RequestSchema):
    model_name: str = Field(..., alias="ModelName", min_length=1)


class SystemModelUpdate(RequestSchema):
    model_name: Optional[str] = Field(None, alias="ModelName", min_length=1)


class SystemModelRead(RecordRead):
    model_name: str = Field(..., alias="ModelName")


# =============================================================================
# 3. 머신 역할 (MachineRole) 스키마
# =============================================================================
class MachineRoleCreate(RequestSchema):
    machine_role_name: str = Field(..., alias="MachineRoleName", min_length=1)
    description: str = Field("", alias="Description")


class MachineRoleUpdate(RequestSchema):
    machine_role_name: Optional[str] = Field(None, alias="MachineRoleName", min_length=1)
    description: Optional[str] = Field(None, alias="Description")


class MachineRoleRead(RecordRead):
    machine_role_name: str = Field(..., alias="MachineRoleName")
    description: str = Field(..., alias="Description")


# =============================================================================
# 4. 시스템 (System) 스키마
# =============================================================================
class SystemCreate(RequestSchema):
    """
    새 시스템을 등록하기 위한 모델입니다.
    7개의 참조 Id 는 모두 필수이며 CRUD 계층에서 존재 여부를 검사합니다.
    """
    serial_number: str = Field(..., alias="SerialNumber", min_length=1, description="일련번호")
    model_id: int = Field(..., alias="ModelId", description="하드웨어 모델 ID")
    operating_system_id: int = Field(..., alias="OperatingSystemId", description="운영체제 ID")
    reimage: bool = Field(False, alias="Reimage", description="재설치 필요 여부")
    host_vars: str = Field("", alias="HostVars", description="호스트별 설정")
    billed_to_org_unit_id: int = Field(..., alias="BilledToOrgUnitId", description="비용 청구 조직 단위 ID")
    machine_role_id: int = Field(..., alias="MachineRoleId", description="머신 역할 ID")
    building_id: int = Field(..., alias="BuildingId", description="설치 건물 ID")
    vendor_id: int = Field(..., alias="VendorId", description="공급업체 ID")
    architecture_id: int = Field(..., alias="ArchitectureId", description="아키텍처 ID")
    ram: int = Field(..., alias="RAM", ge=0, description="메모리 크기 (MiB)")
    cpu_cores: int = Field(..., alias="CPUCores", ge=0, description="CPU 코어 수")


class SystemUpdate(RequestSchema):
    serial_number: Optional[str] = Field(None, alias="SerialNumber", min_length=1)
    model_id: Optional[int] = Field(None, alias="ModelId")
    operating_system_id: Optional[int] = Field(None, alias="OperatingSystemId")
    reimage: Optional[bool] = Field(None, alias="Reimage")
    host_vars: Optional[str] = Field(None, alias="HostVars")
    billed_to_org_unit_id: Optional[int] = Field(None, alias="BilledToOrgUnitId")
    machine_role_id: Optional[int] = Field(None, alias="MachineRoleId")
    building_id: Optional[int] = Field(None, alias="BuildingId")
    vendor_id: Optional[int] = Field(None, alias="VendorId")
    architecture_id: Optional[int] = Field(None, alias="ArchitectureId")
    ram: Optional[int] = Field(None, alias="RAM", ge=0)
    cpu_cores: Optional[int] = Field(None, alias="CPUCores", ge=0)


class SystemRead(RecordRead):
    serial_number: str = Field(..., alias="SerialNumber")
    model_id: int = Field(..., alias="ModelId")
    operating_system_id: int = Field(..., alias="OperatingSystemId")
    reimage: bool = Field(..., alias="Reimage")
    host_vars: str = Field(..., alias="HostVars")
    billed_to_org_unit_id: int = Field(..., alias="BilledToOrgUnitId")
    machine_role_id: int = Field(..., alias="MachineRoleId")
    building_id: int = Field(..., alias="BuildingId")
    vendor_id: int = Field(..., alias="VendorId")
    architecture_id: int = Field(..., alias="ArchitectureId")
    ram: int = Field(..., alias="RAM")
    cpu_cores: int = Field(..., alias="CPUCores")


# =============================================================================
# 5. 네트워크 인터페이스 (NetworkInterface) 스키마
# =============================================================================
class NetworkInterfaceCreate(RequestSchema):
    device_model: str = Field(..., alias="DeviceModel")
    device_id: str = Field(..., alias="DeviceId")
    mac_address: str = Field(..., alias="MACAddress", min_length=1, description="MAC 주소 (고유)")
    system_id: int = Field(..., alias="SystemId")
    ip_address: str = Field(..., alias="IpAddress")
    bitmask: int = Field(..., alias="Bitmask", ge=0, le=IPV4_BITMASK_MAX, description="IPv4 접두사 길이 (0-32)")
    gateway: str = Field("", alias="Gateway")


class NetworkInterfaceUpdate(RequestSchema):
    device_model: Optional[str] = Field(None, alias="DeviceModel")
    device_id: Optional[str] = Field(None, alias="DeviceId")
    mac_address: Optional[str] = Field(None, alias="MACAddress", min_length=1)
    system_id: Optional[int] = Field(None, alias="SystemId")
    ip_address: Optional[str] = Field(None, alias="IpAddress")
    bitmask: Optional[int] = Field(None, alias="Bitmask", ge=0, le=IPV4_BITMASK_MAX)
    gateway: Optional[str] = Field(None, alias="Gateway")


class NetworkInterfaceRead(RecordRead):
    device_model: str = Field(..., alias="DeviceModel")
    device_id: str = Field(..., alias="DeviceId")
    mac_address: str = Field(..., alias="MACAddress")
    system_id: int = Field(..., alias="SystemId")
    ip_address: str = Field(..., alias="IpAddress")
    bitmask: int = Field(..., alias="Bitmask")
    gateway: str = Field(..., alias="Gateway")


# =============================================================================
# 6. 스토리지 볼륨 (StorageVolume) 스키마
# =============================================================================
class StorageVolumeCreate(RequestSchema):
    volume_name: str = Field(..., alias="VolumeName", min_length=1)
    storage_type: str = Field(..., alias="StorageType")
    device_model: str = Field(..., alias="DeviceModel")
    device_id: str = Field(..., alias="DeviceId")
    mount_point: str = Field("", alias="MountPoint")
    volume_size: int = Field(..., alias="VolumeSize", ge=0)
    volume_format: str = Field("", alias="VolumeFormat")
    volume_label: str = Field("", alias="VolumeLabel")
    system_id: int = Field(..., alias="SystemId")


class StorageVolumeUpdate(RequestSchema):
    volume_name: Optional[str] = Field(None, alias="VolumeName", min_length=1)
    storage_type: Optional[str] = Field(None, alias="StorageType")
    device_model: Optional[str] = Field(None, alias="DeviceModel")
    device_id: Optional[str] = Field(None, alias="DeviceId")
    mount_point: Optional[str] = Field(None, alias="MountPoint")
    volume_size: Optional[int] = Field(None, alias="VolumeSize", ge=0)
    volume_format: Optional[str] = Field(None, alias="VolumeFormat")
    volume_label: Optional[str] = Field(None, alias="VolumeLabel")
    system_id: Optional[int] = Field(None, alias="SystemId")


class StorageVolumeRead(RecordRead):
    volume_name: str = Field(..., alias="VolumeName")
    storage_type: str = Field(..., alias="StorageType")
    device_model: str = Field(..., alias="DeviceModel")
    device_id: str = Field(..., alias="DeviceId")
    mount_point: str = Field(..., alias="MountPoint")
    volume_size: int = Field(..., alias="VolumeSize")
    volume_format: str = Field(..., alias="VolumeFormat")
    volume_label: str = Field(..., alias="VolumeLabel")
    system_id: int = Field(..., alias="SystemId")
