# app/core/crud_base.py

"""
공통 CRUD(Create, Read, Update, Delete) 작업을 위한 기본 클래스 모듈입니다.

각 레지스트리 테이블은 CRUDBase 를 상속하고 다음 스키마 서술자(descriptor)만 정의합니다.
- `label`: 메시지에 쓰이는 표시 이름 (예: "Building")
- `name_field`: 대표 이름 속성 (byName 조회 및 메시지용)
- `display_field`: byName 조회 없이 메시지에만 쓰이는 속성 (예: SerialNumber)
- `unique_fields` / `unique_together`: 중복 검사 대상 키
- `references`: 외래 키 속성 -> 대상 모델 (애플리케이션 계층 참조 무결성 검사)
- `protected_ids`: 삭제할 수 없는 시드 레코드 Id

모든 쓰기 작업은 하나의 트랜잭션(app.core.database.transaction) 안에서 수행되며,
삭제는 연쇄 삭제하지 않고 다른 레코드가 참조 중이면 ReferentialConflict 로 거부됩니다.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import func, select as sa_select
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import transaction
from app.core.exceptions import (
    Conflict,
    Forbidden,
    MalformedRequest,
    NotFound,
    ReferentialConflict,
    no_records_found,
)

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    모든 CRUD 작업에 대한 기본 클래스를 정의합니다.
    """
    label: str = "Record"
    name_field: Optional[str] = None
    display_field: Optional[str] = None
    unique_fields: Tuple[str, ...] = ()
    unique_together: Tuple[Tuple[str, ...], ...] = ()
    references: Dict[str, Type[SQLModel]] = {}
    protected_ids: Tuple[int, ...] = ()

    def __init__(self, model: Type[ModelType]):
        self.model = model

    # -------------------------------------------------------------------------
    # 보조 메서드
    # -------------------------------------------------------------------------
    def column_name(self, attribute: str) -> str:
        """파이썬 속성 이름에 대응하는 저장소 컬럼 이름 (예: building_name -> BuildingName)"""
        return self.model.__mapper__.get_property(attribute).columns[0].name

    def display_name(self, db_obj: ModelType) -> str:
        field = self.display_field or self.name_field
        if field:
            return str(getattr(db_obj, field))
        return str(db_obj.id)

    def not_found(self, key: str, value: Any) -> NotFound:
        return NotFound(f"no records found with {self.label.lower()} {key} {value}")

    # -------------------------------------------------------------------------
    # 조회 (읽기 전용)
    # -------------------------------------------------------------------------
    async def get(self, db: AsyncSession, id: Any) -> Optional[ModelType]:
        """
        ID를 기준으로 단일 레코드를 조회합니다.
        """
        return await db.get(self.model, id)

    async def get_or_raise(self, db: AsyncSession, id: Any) -> ModelType:
        """ID로 조회하고, 없으면 NotFound(400)를 발생시킵니다."""
        db_obj = await self.get(db, id)
        if db_obj is None:
            raise self.not_found("id", id)
        return db_obj

    async def get_multi(
        self, db: AsyncSession, *, skip: int = 0, limit: Optional[int] = None, **kwargs: Any
    ) -> List[ModelType]:
        """
        여러 레코드를 Id 순으로 조회합니다. 필터링을 위한 키워드 인자를 지원합니다.
        """
        query = select(self.model)
        for field, value in kwargs.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)
        query = query.order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)

        result = await db.exec(query)
        return list(result.all())

    async def get_multi_or_raise(self, db: AsyncSession, **kwargs: Any) -> List[ModelType]:
        """목록을 조회하고, 결과가 비어 있으면 404 'no records found!' 를 발생시킵니다."""
        records = await self.get_multi(db, **kwargs)
        if not records:
            raise no_records_found()
        return records

    async def get_by_attribute(
        self, db: AsyncSession, *, attribute: str, value: Any
    ) -> Optional[ModelType]:
        """속성 값이 정확히 일치하는 첫 번째 레코드 (대소문자 구분)"""
        statement = select(self.model).where(getattr(self.model, attribute) == value).order_by(self.model.id)
        result = await db.exec(statement)
        return result.first()

    async def get_by_attribute_or_raise(
        self, db: AsyncSession, *, attribute: str, value: Any, key: Optional[str] = None
    ) -> ModelType:
        """
        보조 키 조회입니다. 빈 값이거나 일치하는 레코드가 없으면 NotFound(400)를 발생시킵니다.
        """
        key = key or self.column_name(attribute)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise self.not_found(key, "''")
        db_obj = await self.get_by_attribute(db, attribute=attribute, value=value)
        if db_obj is None:
            raise self.not_found(key, value)
        return db_obj

    async def get_by_name(self, db: AsyncSession, *, name: str) -> ModelType:
        if not self.name_field:
            raise NotFound(f"{self.label} records have no name key")
        return await self.get_by_attribute_or_raise(db, attribute=self.name_field, value=name, key="name")

    # -------------------------------------------------------------------------
    # 무결성 검사
    # -------------------------------------------------------------------------
    async def check_unique(self, db: AsyncSession, data: Dict[str, Any], *, exclude_id: Optional[int] = None) -> None:
        """단일/복합 고유 키 중복 시 Conflict 를 발생시킵니다."""
        for field in self.unique_fields:
            value = data.get(field)
            if value is None:
                continue
            existing = await self.get_by_attribute(db, attribute=field, value=value)
            if existing is not None and existing.id != exclude_id:
                raise Conflict(f"{self.label} with {self.column_name(field)} '{value}' already exists")

        for fields in self.unique_together:
            if not any(field in data for field in fields):
                continue
            query = select(self.model)
            for field in fields:
                query = query.where(getattr(self.model, field) == data.get(field))
            existing = (await db.exec(query)).first()
            if existing is not None and existing.id != exclude_id:
                keys = ", ".join(f"{self.column_name(f)}={data.get(f)!r}" for f in fields)
                raise Conflict(f"{self.label} with {keys} already exists")

    async def check_references(self, db: AsyncSession, data: Dict[str, Any]) -> None:
        """외래 키 값이 실제 레코드를 가리키는지 확인합니다."""
        for field, target in self.references.items():
            value = data.get(field)
            if value is None:
                continue
            if await db.get(target, value) is None:
                raise MalformedRequest(
                    f"{self.column_name(field)} {value} does not reference an existing {target.__tablename__} record"
                )

    async def find_inbound_references(self, db: AsyncSession, id: int) -> List[str]:
        """
        이 레코드를 참조하는 다른 테이블의 행을 찾아 `테이블.컬럼` 목록으로 반환합니다.
        SQLModel.metadata 의 외래 키 정보를 이용하므로 테이블이 추가되어도 별도 등록이 필요 없습니다.
        """
        target = self.model.__table__
        found: List[str] = []
        for table in SQLModel.metadata.sorted_tables:
            for column in table.columns:
                if not any(fk.column.table is target for fk in column.foreign_keys):
                    continue
                statement = sa_select(func.count()).select_from(table).where(column == id)
                if table is target:
                    # 자기 자신을 가리키는 행(SYSTEM 사용자의 CreatorId)은 제외
                    statement = statement.where(table.c.Id != id)
                if await db.scalar(statement):
                    found.append(f"{table.name}.{column.name}")
        return found

    def integrity_error(self, exc: IntegrityError) -> Exception:
        """저장소가 거부한 제약 조건 위반을 오류 종류로 변환합니다."""
        message = str(exc.orig)
        if "UNIQUE" in message:
            return Conflict(f"{self.label} already exists: {message}")
        if "FOREIGN KEY" in message:
            return ReferentialConflict(f"{self.label} violates a reference constraint: {message}")
        return MalformedRequest(f"{self.label} was rejected by the store: {message}")

    # -------------------------------------------------------------------------
    # 쓰기 (트랜잭션)
    # -------------------------------------------------------------------------
    async def create(self, db: AsyncSession, *, obj_in: CreateSchemaType, creator_id: int) -> ModelType:
        """
        새로운 레코드를 생성합니다. CreatorId 는 인증된 호출자로부터 채워지며
        클라이언트가 보낸 값은 사용하지 않습니다.
        """
        data = obj_in.model_dump(exclude={"id", "creator_id", "creation_date"})
        return await self.create_from_data(db, data=data, creator_id=creator_id)

    async def create_from_data(self, db: AsyncSession, *, data: Dict[str, Any], creator_id: int) -> ModelType:
        await self.check_unique(db, data)
        await self.check_references(db, data)

        db_obj = self.model(**data, creator_id=creator_id)
        try:
            async with transaction(db):
                db.add(db_obj)
                await db.flush()
        except IntegrityError as e:
            raise self.integrity_error(e) from e
        await db.refresh(db_obj)
        logger.info("%s '%s' has been added (Id %s, creator %s)", self.label, self.display_name(db_obj), db_obj.id, creator_id)
        return db_obj

    async def update(
        self, db: AsyncSession, *, db_obj: ModelType, obj_in: UpdateSchemaType
    ) -> ModelType:
        """
        기존 레코드를 컬럼 단위로 업데이트합니다.
        요청에 포함된 필드만 변경하며 CreatorId, CreationDate 는 절대 변경하지 않습니다.
        """
        update_data = obj_in.model_dump(exclude_unset=True, exclude_none=True)
        for key in ("id", "creator_id", "creation_date"):
            update_data.pop(key, None)
        return await self.update_from_data(db, db_obj=db_obj, data=update_data)

    async def update_from_data(self, db: AsyncSession, *, db_obj: ModelType, data: Dict[str, Any]) -> ModelType:
        check_data = dict(data)
        for group in self.unique_together:
            for field in group:
                check_data.setdefault(field, getattr(db_obj, field))
        await self.check_unique(db, check_data, exclude_id=db_obj.id)
        await self.check_references(db, data)

        try:
            async with transaction(db):
                for key, value in data.items():
                    setattr(db_obj, key, value)
                db.add(db_obj)
                await db.flush()
        except IntegrityError as e:
            raise self.integrity_error(e) from e
        await db.refresh(db_obj)
        logger.info("%s with Id '%s' has been updated (%s)", self.label, db_obj.id, ", ".join(sorted(data)) or "no changes")
        return db_obj

    async def remove(self, db: AsyncSession, *, id: int) -> ModelType:
        """
        ID를 기준으로 레코드를 삭제합니다.
        - 존재하지 않으면 NotFound
        - 시드 레코드이면 Forbidden
        - 다른 레코드가 참조 중이면 ReferentialConflict (변경 없음)
        """
        db_obj = await self.get_or_raise(db, id)
        if id in self.protected_ids:
            raise Forbidden(f"Built-in {self.label.lower()} with Id '{id}' cannot be removed")

        inbound = await self.find_inbound_references(db, id)
        if inbound:
            raise ReferentialConflict(
                f"Unable to remove {self.label.lower()} with Id '{id}': still referenced by {', '.join(inbound)}"
            )

        try:
            async with transaction(db):
                await db.delete(db_obj)
                await db.flush()
        except IntegrityError as e:
            raise ReferentialConflict(f"Unable to remove {self.label.lower()} with Id '{id}': {e.orig}") from e
        logger.info("%s with Id '%s' has been removed", self.label, id)
        return db_obj
