# tests/__init__.py

"""
Allocator 애플리케이션의 테스트 스위트 패키지입니다.

테스트는 `pytest` 와 `pytest-asyncio` 를 기반으로 하며, httpx.AsyncClient 로 ASGI 앱에 직접 요청합니다.

- `conftest.py`: 테스트마다 임시 SQLite 파일을 만드는 엔진/세션 픽스처, 인증 클라이언트,
                 인벤토리 참조 데이터 픽스처를 정의합니다.
- `domains/`: 도메인(usr, loc, ven, img, inv)별 API 통합 테스트.
- `test_main.py`: 헬스 체크와 공통 오류 봉투 테스트.
- `test_setup_tool.py`: 설정 도구 테스트.
"""

__title__ = "Allocator API Tests"
__description__ = "Test suite for the Allocator inventory registry."
__version__ = "0.1.0"
__all__ = []
