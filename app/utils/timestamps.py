# app/utils/timestamps.py

"""
저장소 타임스탬프 유틸리티입니다.

SQLite 의 CURRENT_TIMESTAMP 는 `YYYY-MM-DD HH:MM:SS` (UTC) 문자열을 저장하지만,
드라이버/ORM 경로에 따라 마이크로초나 `T` 구분자가 섞여 돌아올 수 있으므로
API 로 나가는 모든 날짜/시간 필드는 이 모듈을 거쳐 한 가지 형태로 맞춥니다.
"""

from datetime import UTC, datetime
from typing import Optional, Union

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def normalize_timestamp(value: Union[datetime, str, None]) -> Optional[str]:
    """
    날짜/시간 값을 `YYYY-MM-DD HH:MM:SS` 문자열로 정규화합니다.
    datetime 객체, SQLite 타임스탬프 문자열, ISO 8601 문자열을 모두 허용합니다.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text_value = value.strip().replace("T", " ")
        if text_value.endswith("Z"):
            text_value = text_value[:-1]
        value = datetime.fromisoformat(text_value)
    return value.strftime(TIMESTAMP_FORMAT)


def utc_now() -> datetime:
    """CURRENT_TIMESTAMP 와 같은 정밀도(초)의 naive UTC 현재 시각"""
    return datetime.now(UTC).replace(tzinfo=None, microsecond=0)
