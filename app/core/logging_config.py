# app/core/logging_config.py

"""
애플리케이션 로깅 설정 모듈입니다.

모든 로그 레코드는 `INFO: <logger>: <message>` / `ERROR: <logger>: <message>` 형태의
분류 접두사를 가지도록 구성됩니다. 운영 환경에서는 stderr 로만 출력합니다.
"""

import logging
import sys
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """
    루트 로거를 설정합니다. 여러 번 호출되어도 한 번만 적용됩니다.
    - `level`: 로그 레벨 이름 (미지정 시 settings.LOG_LEVEL)
    """
    global _configured
    if _configured:
        return

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # SQL 에코는 DEBUG_MODE 에서만 엔진이 직접 출력합니다.
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    _configured = True
    logging.getLogger(__name__).info("Logging configured at level %s", logging.getLevelName(log_level))
