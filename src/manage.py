"""Administrative commands.

Usage::

    python src/manage.py init-db
    python src/manage.py create-admin --username admin --email me@example.com
    python src/manage.py set-password --username admin
"""

import asyncio

import click

from api.v1.dependencies import get_auth_service
from core.exceptions import AppException
from core.logging import setup_logging
from domain.entities.user import UserRole
from infrastructure.database.models import Base
from infrastructure.database.session import engine


async def _create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def _create_admin(username: str, email: str, password: str) -> str:
    try:
        user = await get_auth_service().register(
            username=username, email=email, password=password, role=UserRole.ADMIN
        )
        return user.id
    finally:
        await engine.dispose()


async def _set_password(username: str, password: str) -> int:
    try:
        user = await get_auth_service().set_password(username, password)
        return user.token_version
    finally:
        await engine.dispose()


@click.group()
def cli() -> None:
    """Portfolio API administration."""
    setup_logging()


@cli.command("init-db")
def init_db() -> None:
    """Create all tables. For development; use Alembic migrations in production."""
    asyncio.run(_create_tables())
    click.echo("Tables created.")


@cli.command("create-admin")
@click.option("--username", prompt="Admin username")
@click.option("--email", prompt="Admin email")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def create_admin(username: str, email: str, password: str) -> None:
    """Create an admin account with a local password."""
    try:
        user_id = asyncio.run(_create_admin(username, email, password))
    except AppException as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Created admin {username} ({user_id}).")


@cli.command("set-password")
@click.option("--username", prompt="Username")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def set_password(username: str, password: str) -> None:
    """Replace a user's password and revoke their existing tokens."""
    try:
        version = asyncio.run(_set_password(username, password))
    except AppException as exc:
        raise click.ClickException(exc.message) from exc
    click.echo(f"Password updated for {username}; tokens issued before now are revoked (version {version}).")


if __name__ == "__main__":
    cli()
