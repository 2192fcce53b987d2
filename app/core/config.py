# app/core/config.py

import os
import secrets
from typing import Any, Optional, Tuple, Type

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# JSON 설정 파일 경로를 지정하는 환경 변수 (예: config/config.json)
CONFIG_FILE_ENV = "ALLOCATOR_CONFIG"


def sqlite_url(db_path: str) -> str:
    """SQLite 파일 경로를 aiosqlite 드라이버용 SQLAlchemy 접속 URL 로 변환합니다."""
    return f"sqlite+aiosqlite:///{db_path}"


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수, .env 파일, 그리고 (선택적으로) JSON 설정 파일에서 값을 자동으로 로드합니다.
    JSON 설정 파일은 기존 배포본의 키 이름(DbPath, TcpPort, UseTLS ...)을 그대로 사용할 수 있습니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True,                 # 환경 변수 이름 대소문자 구분
        populate_by_name=True,
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Allocator Inventory API"
    APP_VERSION: str = "0.1.0"
    # 디버그 모드 활성화 여부 (SQL 쿼리 출력)
    DEBUG_MODE: bool = Field(False, description="Echo SQL statements issued by the engine")
    LOG_LEVEL: str = Field("INFO", description="Root log level (DEBUG, INFO, WARNING, ERROR)")

    # --- 데이터베이스 설정 ---
    DB_PATH: str = Field(
        os.path.join(BASE_DIR, "allocator.db"),
        validation_alias=AliasChoices("DB_PATH", "DbPath"),
        description="Filesystem path of the SQLite store file",
    )

    # --- 리스너 설정 ---
    TCP_PORT: int = Field(5000, validation_alias=AliasChoices("TCP_PORT", "TcpPort"), description="Plain HTTP port")
    TLS_TCP_PORT: int = Field(5443, validation_alias=AliasChoices("TLS_TCP_PORT", "TLSTcpPort"), description="HTTPS port")
    TLS_PEM_FILE: Optional[str] = Field(None, validation_alias=AliasChoices("TLS_PEM_FILE", "TLSPemFile"), description="TLS certificate (PEM)")
    TLS_KEY_FILE: Optional[str] = Field(None, validation_alias=AliasChoices("TLS_KEY_FILE", "TLSKeyFile"), description="TLS private key")
    USE_TLS: bool = Field(False, validation_alias=AliasChoices("USE_TLS", "UseTLS"), description="Serve over TLS on TLS_TCP_PORT")

    # --- 세션 쿠키 서명 키 ---
    SECRET_KEY: SecretStr = Field(
        default_factory=lambda: SecretStr(secrets.token_hex(32)),
        description="Secret used to sign the session cookie. Keep this highly secure!",
    )

    @property
    def DATABASE_URL(self) -> str:
        """aiosqlite 드라이버용 SQLAlchemy 접속 URL"""
        return sqlite_url(self.DB_PATH)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # 우선순위: 생성자 인자 > 환경 변수 > .env > JSON 설정 파일 > secrets
        sources: list[Any] = [init_settings, env_settings, dotenv_settings]
        config_file = os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            sources.append(JsonConfigSettingsSource(settings_cls, json_file=config_file))
        sources.append(file_secret_settings)
        return tuple(sources)


settings = Settings()
