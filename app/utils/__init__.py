# app/utils/__init__.py

"""
FastAPI 애플리케이션의 'utils' 패키지입니다.

이 패키지는 특정 비즈니스 도메인에 속하지 않는,
프로젝트 전반에서 재사용될 수 있는 범용 유틸리티 함수들을 포함합니다.

주요 서브모듈:
- `timestamps.py`: 저장소 타임스탬프 정규화 (`YYYY-MM-DD HH:MM:SS`) 및 현재 시각 유틸리티.
"""

# flake8: noqa
from . import timestamps

__title__ = "Allocator Application Utilities"
__version__ = "0.1.0"
__all__ = ["timestamps"]
