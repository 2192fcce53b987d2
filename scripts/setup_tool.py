# scripts/setup_tool.py

"""
저장소 파일을 준비하는 설정 도구입니다.

1. 저장소 파일이 없으면 스키마와 시드 레코드를 생성합니다.
2. 'administrators' 역할과 'admin' 계정(비밀번호 'admin')을 보장합니다.
3. 요청된 조직 단위/역할/계정을 추가로 생성합니다.

생성되는 모든 레코드의 생성자는 SYSTEM(Id 1) 입니다. 이미 존재하는 레코드는 건너뜁니다.

사용 예:
    python -m scripts.setup_tool -d ./allocator.db -a jdoe -f "Jane Doe" -o lab -O "Lab systems"
"""

import asyncio
import logging
from typing import Optional

import typer
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.database import (
    SYSTEM_USER_ID,
    UNASSIGNED_OU_ID,
    build_engine,
    get_async_session_context,
    init_database,
)
from app.core.logging_config import configure_logging
from app.domains.usr import crud as usr_crud
from app.domains.usr import schemas as usr_schemas

logger = logging.getLogger("setup_tool")

ADMIN_ROLE_NAME = "administrators"
ADMIN_ROLE_DESCRIPTION = "Accounts that have full administrative rights to the system"
ADMIN_ACCOUNT = "admin"
ADMIN_FULL_NAME = "Administrator"
ADMIN_INITIAL_PASSWORD = "admin"

cli = typer.Typer(add_completion=False)


async def ensure_role(db: AsyncSession, *, name: str, description: str) -> int:
    existing = await usr_crud.role.get_by_attribute(db, attribute="role_name", value=name)
    if existing is not None:
        logger.info("Role '%s' already exists (Id %s), skipping", name, existing.id)
        return existing.id
    created = await usr_crud.role.create(
        db, obj_in=usr_schemas.RoleCreate(role_name=name, description=description), creator_id=SYSTEM_USER_ID
    )
    return created.id


async def ensure_org_unit(db: AsyncSession, *, name: str, description: str) -> int:
    existing = await usr_crud.organizational_unit.get_by_attribute(db, attribute="ou_name", value=name)
    if existing is not None:
        logger.info("Organizational unit '%s' already exists (Id %s), skipping", name, existing.id)
        return existing.id
    created = await usr_crud.organizational_unit.create(
        db, obj_in=usr_schemas.OrganizationalUnitCreate(ou_name=name, description=description), creator_id=SYSTEM_USER_ID
    )
    return created.id


async def ensure_account(
    db: AsyncSession, *, user_name: str, full_name: str, password: str, org_unit_id: int, role_id: int
) -> Optional[int]:
    existing = await usr_crud.user.get_by_attribute(db, attribute="user_name", value=user_name)
    if existing is not None:
        logger.info("Account '%s' already exists (Id %s), skipping", user_name, existing.id)
        return None
    created = await usr_crud.user.create(
        db,
        obj_in=usr_schemas.UserCreate(
            user_name=user_name,
            full_name=full_name,
            password=password,
            org_unit_id=org_unit_id,
            role_id=role_id,
        ),
        creator_id=SYSTEM_USER_ID,
    )
    return created.id


async def run_setup(
    database_file: str,
    *,
    account: Optional[str] = None,
    full_name: Optional[str] = None,
    password: Optional[str] = None,
    org_unit: Optional[str] = None,
    org_unit_description: str = "",
    role: Optional[str] = None,
    role_description: str = "",
) -> None:
    """
    설정 작업을 순서대로 수행합니다. 각 단계는 독립된 트랜잭션으로 커밋됩니다.
    """
    engine = build_engine(database_file)
    try:
        if await init_database(database_file, bind=engine):
            logger.info("Created database file %s", database_file)

        async with get_async_session_context(engine) as db:
            admin_role_id = await ensure_role(db, name=ADMIN_ROLE_NAME, description=ADMIN_ROLE_DESCRIPTION)
            if await ensure_account(
                db,
                user_name=ADMIN_ACCOUNT,
                full_name=ADMIN_FULL_NAME,
                password=ADMIN_INITIAL_PASSWORD,
                org_unit_id=UNASSIGNED_OU_ID,
                role_id=admin_role_id,
            ):
                logger.warning("Account '%s' created with the initial password; change it immediately", ADMIN_ACCOUNT)

            org_unit_id = UNASSIGNED_OU_ID
            if org_unit:
                org_unit_id = await ensure_org_unit(db, name=org_unit, description=org_unit_description)

            role_id = admin_role_id
            if role:
                role_id = await ensure_role(db, name=role, description=role_description)

            if account:
                await ensure_account(
                    db,
                    user_name=account,
                    full_name=full_name or "",
                    password=password or "",
                    org_unit_id=org_unit_id,
                    role_id=role_id,
                )
    finally:
        await engine.dispose()


@cli.command()
def main(
    database_file: str = typer.Option(..., "--database-file", "-d", help="저장소 파일 경로 (없으면 생성)"),
    account: Optional[str] = typer.Option(None, "--account", "-a", help="생성할 계정 이름"),
    full_name: Optional[str] = typer.Option(None, "--fullname", "-f", help="계정의 전체 이름 (-a 와 함께 필수)"),
    org_unit: Optional[str] = typer.Option(None, "--org-unit", "-o", help="생성할 조직 단위 이름"),
    org_unit_description: str = typer.Option("", "--org-unit-description", "-O", help="조직 단위 설명"),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="생성할 역할 이름"),
    role_description: str = typer.Option("", "--role-description", "-D", help="역할 설명"),
):
    """
    Allocator 저장소를 초기화하고 관리자 계정과 요청된 레코드를 생성합니다.
    """
    configure_logging()
    password = None
    if account:
        if not full_name:
            typer.echo("오류: -a/--account 를 지정하면 -f/--fullname 이 필요합니다.", err=True)
            raise typer.Exit(code=2)
        password = typer.prompt(f"'{account}' 계정의 비밀번호를 입력하세요", hide_input=True, confirmation_prompt=True)

    asyncio.run(
        run_setup(
            database_file,
            account=account,
            full_name=full_name,
            password=password,
            org_unit=org_unit,
            org_unit_description=org_unit_description,
            role=role,
            role_description=role_description,
        )
    )


if __name__ == "__main__":
    cli()
