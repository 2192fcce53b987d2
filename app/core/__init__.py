# app/core/__init__.py

"""
FastAPI 애플리케이션의 핵심 구성 요소 패키지입니다.

이 패키지는 애플리케이션 전반에 걸쳐 사용되는 공통적이고 핵심적인 기능들을 캡슐화합니다.
주요 서브모듈은 다음과 같습니다:

- `config.py`: 애플리케이션의 설정 및 환경 변수 관리 (Pydantic Settings).
- `database.py`: SQLite 연결, 트랜잭션 경계, 초기 스키마/시드 생성 (SQLModel 및 AsyncSQLAlchemy).
- `crud_base.py`: 모든 자산 테이블이 공유하는 범용 CRUD 리소스.
- `security.py`: 비밀번호 다이제스트와 HTTP Basic 인증 의존성.
- `exceptions.py`: 오류 종류별 HTTPException 과 JSON 오류 핸들러.
- `logging_config.py`: 로깅 초기화.
"""
