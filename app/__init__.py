# app/__init__.py

"""
Allocator 인벤토리 레지스트리 FastAPI 애플리케이션의 메인 패키지입니다.

이 패키지는 애플리케이션의 핵심 로직과 도메인별 모듈을 포함합니다.
FastAPI 애플리케이션의 진입점 (main.py)과
공통 설정, 데이터베이스 연결, 보안 관련 유틸리티를 담는 core 서브패키지,
그리고 각 자산 도메인(usr, loc, ven, img, inv, shared)을 대표하는 domains 서브패키지로 구성됩니다.
"""

APP_NAME = "Allocator Inventory API"
APP_VERSION = "0.1.0"
API_PREFIX = "/api/v1"  # API 라우트의 공통 접두사 (main.py에서 적용)

# PEP 440 (Version Identification and Dependency Specification)을 따르는 버전 정보
# 이 정보는 pyproject.toml 에서도 동일하게 유지합니다.
__version__ = APP_VERSION
__title__ = APP_NAME
__description__ = "Inventory registry for OS image provisioning (systems, OS images, sites, users)."
__all__ = ["APP_NAME", "APP_VERSION", "API_PREFIX"]
