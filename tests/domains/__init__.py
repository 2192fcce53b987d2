# tests/domains/__init__.py

"""
도메인별 API 통합 테스트 패키지입니다.

- `test_auth_n.py`: HTTP Basic 인증과 세션 재검증.
- `test_usr_n.py`: 사용자, 역할, 조직 단위.
- `test_loc_n.py`: 건물.
- `test_ven_n.py`: 공급업체.
- `test_img_n.py`: 운영체제 계열, 운영체제, 운영체제 버전.
- `test_inv_n.py`: 아키텍처, 모델, 머신 역할, 시스템, 네트워크 인터페이스, 스토리지 볼륨.
"""

__title__ = "Allocator Domain Tests"
__version__ = "0.1.0"
__all__ = []
