# app/domains/inv/__init__.py

"""
FastAPI 애플리케이션의 'inv' 도메인 패키지입니다.

'inv' 도메인은 시스템(System) 인벤토리와 그 구성 요소
(Architecture, SystemModel, MachineRole, NetworkInterface, StorageVolume)를 관리하는 역할을 합니다.

주요 서브모듈:
- `models.py`: 'inv' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 'inv' 도메인 데이터에 대한 Pydantic 모델 (요청 및 응답 유효성 검사).
- `crud.py`: 'inv' 도메인 테이블에 대한 비동기 CRUD 로직.
- `routers.py`: 'inv' 도메인 데이터에 접근하기 위한 FastAPI API 엔드포인트 정의.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Allocator Inventory Domain"
__description__ = "Manages systems, their hardware descriptors, network interfaces and storage volumes."
__version__ = "0.1.0"
__all__ = []  # 'from app.domains.inv import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
