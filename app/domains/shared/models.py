# app/domains/shared/models.py

"""
'shared' 도메인의 데이터베이스 ORM 모델을 정의하는 모듈입니다.

- `RecordBase`: 모든 레지스트리 테이블이 공유하는 공통 컬럼(Id, CreatorId, CreationDate) 믹스인.
- `Audit`: 변경 이력 테이블. 스키마만 설치되며 핸들러가 직접 기록하지는 않습니다.

컬럼 이름은 기존 저장소 파일과의 호환을 위해 PascalCase 를 그대로 사용하고,
파이썬 속성 이름은 snake_case 를 사용합니다 (`sa_column_kwargs={"name": ...}`).
"""

from typing import Optional
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.sql import func
from sqlmodel import Field, SQLModel

from app.utils.timestamps import utc_now

USERS_ID = "Users.Id"  # CreatorId 가 참조하는 컬럼


# =============================================================================
# 1. 공통 컬럼 믹스인
# =============================================================================
class RecordBase(SQLModel):
    """
    모든 레지스트리 테이블의 공통 속성을 정의하는 SQLModel Base 클래스입니다.
    - `id`: AUTOINCREMENT 로 단조 증가하며 재사용되지 않는 대리 키
    - `creator_id`: 레코드를 삽입한 사용자 (인증된 호출자로부터 서버가 채움)
    - `creation_date`: 삽입 시각 (UTC)
    """
    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "Id"})
    creator_id: Optional[int] = Field(
        default=None,
        foreign_key=USERS_ID,
        nullable=False,
        sa_column_kwargs={"name": "CreatorId"},
        description="레코드를 생성한 사용자 ID",
    )
    creation_date: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False,
        # SQLite 는 시간대를 보관하지 않으므로 naive UTC 를 그대로 저장합니다.
        sa_type=DateTime,
        sa_column_kwargs={"name": "CreationDate", "server_default": func.current_timestamp()},
        description="레코드 생성 일시",
    )


# =============================================================================
# 2. Audit 테이블 모델
# =============================================================================
class Audit(SQLModel, table=True):
    """
    변경 이력 테이블에 매핑되는 SQLModel ORM 클래스입니다.
    """
    __tablename__ = "Audit"
    __table_args__ = {"sqlite_autoincrement": True}  # 삭제된 Id 를 재사용하지 않음

    id: Optional[int] = Field(default=None, primary_key=True, sa_column_kwargs={"name": "Id"})
    changed_by_id: int = Field(foreign_key=USERS_ID, sa_column_kwargs={"name": "ChangedById"}, description="변경한 사용자 ID")
    table_changed: str = Field(sa_column_kwargs={"name": "TableChanged"}, description="변경된 테이블 이름")
    change_class: str = Field(sa_column_kwargs={"name": "ChangeClass"}, description="변경 종류 (insert, update, delete)")
    change_date: Optional[datetime] = Field(
        default_factory=utc_now,
        nullable=False,
        sa_type=DateTime,
        sa_column_kwargs={"name": "ChangeDate", "server_default": func.current_timestamp()},
        description="변경 일시",
    )
