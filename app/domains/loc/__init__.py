# app/domains/loc/__init__.py

"""
FastAPI 애플리케이션의 'loc' 도메인 패키지입니다.

'loc' 도메인은 시스템이 설치된 건물/사이트(Building) 정보를 관리하는 역할을 합니다.

주요 서브모듈:
- `models.py`: 'loc' 도메인의 테이블에 매핑되는 SQLModel 정의.
- `schemas.py`: 'loc' 도메인 데이터에 대한 Pydantic 모델 (요청 및 응답 유효성 검사).
- `crud.py`: 'loc' 도메인 테이블에 대한 비동기 CRUD 로직.
- `routers.py`: 'loc' 도메인 데이터에 접근하기 위한 FastAPI API 엔드포인트 정의.
"""

# 패키지 메타데이터 (선택 사항)
__title__ = "Allocator Location Domain"
__description__ = "Manages buildings and sites."
__version__ = "0.1.0"
__all__ = []  # 'from app.domains.loc import *' 시 내보낼 이름 목록. 일반적으로 비워둡니다.
