# app/domains/shared/__init__.py

"""
FastAPI 애플리케이션의 'shared' 도메인 패키지입니다.

모든 레지스트리 테이블이 공유하는 공통 컬럼 믹스인(RecordBase)과
변경 이력(Audit) 테이블 모델을 포함합니다.
"""

__title__ = "Allocator Shared Domain"
__version__ = "0.1.0"
__all__ = []
