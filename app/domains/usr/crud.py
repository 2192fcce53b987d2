# app/domains/usr/crud.py

"""
'usr' 도메인의 CRUD 작업을 담당하는 모듈입니다.

계정 수명 주기(생성, 삭제, 상태 변경, 조직/역할 배정, 비밀번호 교체)를 구현합니다.
모든 변경 작업은 하나의 트랜잭션 안에서 수행됩니다.
"""

import logging
from typing import List

from sqlalchemy import func, select as sa_select
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# 공통 CRUDBase 및 usr 도메인의 구성요소 임포트
from app.core.crud_base import CRUDBase
from app.core.database import SYSTEM_ROLE_ID, SYSTEM_USER_ID, UNASSIGNED_OU_ID
from app.core.exceptions import InvalidStatusValue, NotFound, PasswordHashMismatch
from app.core.security import get_password_hash, verify_password
from app.utils.timestamps import utc_now
from . import models as usr_models
from . import schemas as usr_schemas

logger = logging.getLogger(__name__)

VALID_STATUSES = tuple(status.value for status in usr_models.UserStatus)


# =============================================================================
# 1. Roles 테이블 CRUD
# =============================================================================
class CRUDRole(CRUDBase[usr_models.Role, usr_schemas.RoleCreate, usr_schemas.RoleUpdate]):
    label = "Role"
    name_field = "role_name"
    unique_fields = ("role_name",)
    protected_ids = (SYSTEM_ROLE_ID,)

    def __init__(self):
        super().__init__(model=usr_models.Role)


role = CRUDRole()


# =============================================================================
# 2. OrganizationalUnits 테이블 CRUD
# =============================================================================
class CRUDOrganizationalUnit(
    CRUDBase[
        usr_models.OrganizationalUnit,
        usr_schemas.OrganizationalUnitCreate,
        usr_schemas.OrganizationalUnitUpdate,
    ]
):
    label = "Organizational Unit"
    name_field = "ou_name"
    unique_fields = ("ou_name",)
    protected_ids = (UNASSIGNED_OU_ID,)

    def __init__(self):
        super().__init__(model=usr_models.OrganizationalUnit)


organizational_unit = CRUDOrganizationalUnit()


# =============================================================================
# 3. Users 테이블 CRUD
# =============================================================================
class CRUDUser(CRUDBase[usr_models.User, usr_schemas.UserCreate, usr_schemas.UserCreate]):
    label = "User"
    name_field = "user_name"
    unique_fields = ("user_name",)
    references = {
        "org_unit_id": usr_models.OrganizationalUnit,
        "role_id": usr_models.Role,
    }
    protected_ids = (SYSTEM_USER_ID,)

    def __init__(self):
        super().__init__(model=usr_models.User)

    def not_found(self, key: str, value) -> NotFound:
        return NotFound(f"no records found with user {key} {value}")

    async def get_by_user_name(self, db: AsyncSession, *, user_name: str) -> usr_models.User:
        """사용자 이름으로 사용자를 조회합니다. 없으면 NotFound(400)."""
        return await self.get_by_attribute_or_raise(db, attribute="user_name", value=user_name, key="name")

    async def create(self, db: AsyncSession, *, obj_in: usr_schemas.UserCreate, creator_id: int = SYSTEM_USER_ID) -> usr_models.User:
        """새로운 사용자를 생성하며 비밀번호를 다이제스트로 저장하고 중복을 검사합니다."""
        user_data = obj_in.model_dump(exclude={"password"})
        user_data["password_hash"] = get_password_hash(obj_in.password)
        user_data["status"] = usr_models.UserStatus.ENABLED.value
        return await self.create_from_data(db, data=user_data, creator_id=creator_id)

    async def find_inbound_references(self, db: AsyncSession, id: int) -> List[str]:
        """
        외래 키 참조에 더해, 저장소 수준 외래 키 없이 CreatorId 를 가진 테이블
        (Roles, OrganizationalUnits)에서도 이 사용자를 생성자로 기록한 행을 찾습니다.
        """
        found = await super().find_inbound_references(db, id)
        for table in SQLModel.metadata.sorted_tables:
            creator_column = table.c.get("CreatorId")
            if creator_column is None or creator_column.foreign_keys:
                continue
            statement = sa_select(func.count()).select_from(table).where(creator_column == id)
            if await db.scalar(statement):
                found.append(f"{table.name}.{creator_column.name}")
        return found

    async def remove_by_user_name(self, db: AsyncSession, *, user_name: str) -> usr_models.User:
        """
        사용자를 삭제합니다. 다른 레코드의 CreatorId 로 참조 중이면 ReferentialConflict,
        SYSTEM 계정이면 Forbidden 입니다.
        """
        db_user = await self.get_by_user_name(db, user_name=user_name)
        return await self.remove(db, id=db_user.id)

    async def get_status(self, db: AsyncSession, *, user_name: str) -> str:
        db_user = await self.get_by_user_name(db, user_name=user_name)
        return db_user.status

    async def set_status(self, db: AsyncSession, *, user_name: str, status: str) -> usr_models.User:
        """
        계정 상태를 변경합니다. enabled / locked 이외의 값은 InvalidStatusValue 이며 상태는 바뀌지 않습니다.
        """
        if status not in VALID_STATUSES:
            raise InvalidStatusValue(f"'{status}' is not a valid status; expected one of: {', '.join(VALID_STATUSES)}")
        db_user = await self.get_by_user_name(db, user_name=user_name)
        return await self.update_from_data(db, db_obj=db_user, data={"status": status})

    async def set_org_unit(self, db: AsyncSession, *, user_name: str, org_unit_id: int) -> usr_models.User:
        db_user = await self.get_by_user_name(db, user_name=user_name)
        await organizational_unit.get_or_raise(db, org_unit_id)
        return await self.update_from_data(db, db_obj=db_user, data={"org_unit_id": org_unit_id})

    async def set_role(self, db: AsyncSession, *, user_name: str, role_id: int) -> usr_models.User:
        db_user = await self.get_by_user_name(db, user_name=user_name)
        await role.get_or_raise(db, role_id)
        return await self.update_from_data(db, db_obj=db_user, data={"role_id": role_id})

    async def change_password(
        self, db: AsyncSession, *, user_name: str, old_password: str, new_password: str
    ) -> usr_models.User:
        """
        비밀번호를 교체합니다.
        1. 저장된 다이제스트를 읽습니다.
        2. 이전 비밀번호의 다이제스트를 상수 시간으로 비교합니다.
        3. 불일치하면 PasswordHashMismatch 입니다.
        4. 일치하면 새 다이제스트와 LastPasswordChangedDate 를 기록합니다.
           (이전/새 비밀번호가 같으면 아무 것도 바꾸지 않습니다.)
        """
        db_user = await self.get_by_user_name(db, user_name=user_name)
        if not verify_password(old_password, db_user.password_hash):
            logger.info("Password change rejected for '%s': old password mismatch", user_name)
            raise PasswordHashMismatch("Old password does not match the stored password")
        if old_password == new_password:
            return db_user
        return await self.update_from_data(
            db,
            db_obj=db_user,
            data={
                "password_hash": get_password_hash(new_password),
                "last_password_changed_date": utc_now(),
            },
        )


user = CRUDUser()
