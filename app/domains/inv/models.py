# app/domains/inv/models.py

"""
'inv' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

이 모듈은 시스템 인벤토리에 관련된 테이블에 대한 SQLModel 클래스를 포함합니다.
 - Architecture, SystemModel, MachineRole: 시스템을 분류하는 참조 데이터
 - System: 관리 대상 물리/가상 머신 (7개 참조 테이블을 가리킴)
 - NetworkInterface, StorageVolume: 시스템에 속한 구성 요소 (0..N)

모든 외래 키는 연쇄 삭제 없이 정의되므로, 참조 중인 레코드는 삭제되지 않습니다.
"""

from sqlmodel import Field, SQLModel

from app.domains.shared.models import RecordBase


# =============================================================================
# 1. Architectures 테이블 모델
# =============================================================================
class ArchitectureBase(SQLModel):
    """
    Architectures 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    ise_name: str = Field(sa_column_kwargs={"name": "ISEName", "unique": True}, description="명령어 집합 이름 (예: x86_64)")
    register_size: int = Field(sa_column_kwargs={"name": "RegisterSize"}, description="레지스터 크기 (비트)")


class Architecture(RecordBase, ArchitectureBase, table=True):
    __tablename__ = "Architectures"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 2. SystemModels 테이블 모델
# =============================================================================
class SystemModelBase(SQLModel):
    model_name: str = Field(sa_column_kwargs={"name": "ModelName", "unique": True}, description="하드웨어 모델 이름")


class SystemModel(RecordBase, SystemModelBase, table=True):
    __tablename__ = "SystemModels"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 3. MachineRoles 테이블 모델
# =============================================================================
class MachineRoleBase(SQLModel):
    machine_role_name: str = Field(sa_column_kwargs={"name": "MachineRoleName", "unique": True}, description="머신 역할 이름")
    description: str = Field(default="", sa_column_kwargs={"name": "Description"}, description="머신 역할 설명")


class MachineRole(RecordBase, MachineRoleBase, table=True):
    __tablename__ = "MachineRoles"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 4. Systems 테이블 모델
# =============================================================================
class SystemBase(SQLModel):
    """
    Systems 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    serial_number: str = Field(sa_column_kwargs={"name": "SerialNumber", "unique": True}, description="일련번호")
    model_id: int = Field(foreign_key="SystemModels.Id", sa_column_kwargs={"name": "ModelId"}, description="하드웨어 모델 ID")
    operating_system_id: int = Field(
        foreign_key="OperatingSystems.Id", sa_column_kwargs={"name": "OperatingSystemId"}, description="운영체제 ID"
    )
    reimage: bool = Field(default=False, sa_column_kwargs={"name": "Reimage", "server_default": "0"}, description="재설치 필요 여부")
    host_vars: str = Field(default="", sa_column_kwargs={"name": "HostVars"}, description="호스트별 설정 (불투명 문자열)")
    billed_to_org_unit_id: int = Field(
        foreign_key="OrganizationalUnits.Id", sa_column_kwargs={"name": "BilledToOrgUnitId"}, description="비용 청구 조직 단위 ID"
    )
    machine_role_id: int = Field(foreign_key="MachineRoles.Id", sa_column_kwargs={"name": "MachineRoleId"}, description="머신 역할 ID")
    building_id: int = Field(foreign_key="Buildings.Id", sa_column_kwargs={"name": "BuildingId"}, description="설치 건물 ID")
    vendor_id: int = Field(foreign_key="Vendors.Id", sa_column_kwargs={"name": "VendorId"}, description="공급업체 ID")
    architecture_id: int = Field(foreign_key="Architectures.Id", sa_column_kwargs={"name": "ArchitectureId"}, description="아키텍처 ID")
    ram: int = Field(sa_column_kwargs={"name": "RAM"}, description="메모리 크기 (MiB)")
    cpu_cores: int = Field(sa_column_kwargs={"name": "CPUCores"}, description="CPU 코어 수")


class System(RecordBase, SystemBase, table=True):
    """
    SQLite의 Systems 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "Systems"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 5. NetworkInterfaces 테이블 모델
# =============================================================================
class NetworkInterfaceBase(SQLModel):
    """
    NetworkInterfaces 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    device_model: str = Field(sa_column_kwargs={"name": "DeviceModel"}, description="장치 모델")
    device_id: str = Field(sa_column_kwargs={"name": "DeviceId"}, description="장치 식별자 (예: eth0)")
    mac_address: str = Field(sa_column_kwargs={"name": "MACAddress", "unique": True}, description="MAC 주소")
    system_id: int = Field(foreign_key="Systems.Id", sa_column_kwargs={"name": "SystemId"}, description="소속 시스템 ID")
    ip_address: str = Field(sa_column_kwargs={"name": "IpAddress"}, description="IP 주소")
    bitmask: int = Field(sa_column_kwargs={"name": "Bitmask"}, description="네트워크 접두사 길이")
    gateway: str = Field(default="", sa_column_kwargs={"name": "Gateway"}, description="기본 게이트웨이")


class NetworkInterface(RecordBase, NetworkInterfaceBase, table=True):
    __tablename__ = "NetworkInterfaces"
    __table_args__ = {"sqlite_autoincrement": True}


# =============================================================================
# 6. StorageVolumes 테이블 모델
# =============================================================================
class StorageVolumeBase(SQLModel):
    """
    StorageVolumes 테이블의 기본 속성을 정의하는 SQLModel Base 클래스입니다.
    """
    volume_name: str = Field(sa_column_kwargs={"name": "VolumeName"}, description="볼륨 이름")
    storage_type: str = Field(sa_column_kwargs={"name": "StorageType"}, description="저장 장치 종류 (ssd, hdd, nvme ...)")
    device_model: str = Field(sa_column_kwargs={"name": "DeviceModel"}, description="장치 모델")
    device_id: str = Field(sa_column_kwargs={"name": "DeviceId"}, description="장치 식별자 (예: /dev/sda)")
    mount_point: str = Field(default="", sa_column_kwargs={"name": "MountPoint"}, description="마운트 위치")
    volume_size: int = Field(sa_column_kwargs={"name": "VolumeSize"}, description="볼륨 크기")
    volume_format: str = Field(default="", sa_column_kwargs={"name": "VolumeFormat"}, description="파일 시스템 형식")
    volume_label: str = Field(default="", sa_column_kwargs={"name": "VolumeLabel"}, description="볼륨 레이블")
    system_id: int = Field(foreign_key="Systems.Id", sa_column_kwargs={"name": "SystemId"}, description="소속 시스템 ID")


class StorageVolume(RecordBase, StorageVolumeBase, table=True):
    __tablename__ = "StorageVolumes"
    __table_args__ = {"sqlite_autoincrement": True}
