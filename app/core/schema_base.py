# app/core/schema_base.py

"""
모든 도메인 스키마가 공유하는 Pydantic/SQLModel 기반 클래스와 응답 봉투(envelope)를 정의합니다.

API 의 JSON 필드 이름은 저장소 컬럼 이름과 같은 PascalCase (예: `BuildingName`, `CreatorId`)를 사용하고,
파이썬 코드에서는 snake_case 속성 이름을 사용합니다. 두 이름은 별칭(alias)으로 연결되며
요청 본문은 어느 쪽 이름으로 보내도 허용됩니다.
"""

from datetime import datetime
from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, field_serializer
from sqlmodel import Field, SQLModel

from app.utils.timestamps import normalize_timestamp

T = TypeVar("T")

# SQLite INTEGER (부호 있는 64비트) 의 최댓값. 이보다 큰 Id 는 저장소에 전달할 수 없습니다.
SQLITE_INTEGER_MAX = 2**63 - 1


class RequestSchema(SQLModel):
    """생성/수정 요청 본문 스키마의 기반 클래스"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class RecordRead(SQLModel):
    """
    조회 응답 스키마의 기반 클래스입니다.
    서버가 채우는 공통 필드(Id, CreatorId, CreationDate)를 포함하며,
    CreationDate 는 항상 `YYYY-MM-DD HH:MM:SS` 로 직렬화됩니다.
    """
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int = Field(..., alias="Id", description="레코드 고유 ID")
    creator_id: Optional[int] = Field(None, alias="CreatorId", description="레코드를 생성한 사용자 ID")
    creation_date: Optional[datetime] = Field(None, alias="CreationDate", description="레코드 생성 일시")

    @field_serializer("creation_date")
    def _serialize_creation_date(self, value: Optional[datetime]) -> Optional[str]:
        return normalize_timestamp(value)


class DataResponse(BaseModel, Generic[T]):
    """목록 조회 응답: `{"data": [...]}`"""
    data: T


class MessageResponse(BaseModel):
    """변경 작업 응답: `{"message": "..."}`"""
    message: str


class ErrorResponse(BaseModel):
    """실패 응답: `{"error": "<종류>", "detail": "..."}`"""
    error: str
    detail: Optional[str] = None



# 라우터 문서(OpenAPI)에 표시할 공통 오류 응답
ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "MalformedRequest, NotFound, Conflict ..."},
    401: {"model": ErrorResponse, "description": "Unauthenticated"},
    403: {"model": ErrorResponse, "description": "Forbidden"},
    404: {"model": ErrorResponse, "description": "no records found!"},
    500: {"model": ErrorResponse, "description": "ReferentialConflict, StoreError"},
}
