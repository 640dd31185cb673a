"""Create a super user (Postgres only).

Usage:
    python -m scripts.create_superuser <username> <first_name> <last_name> [password]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys

from access_admin.application.services.user_service import UserService
from access_admin.core.config import get_settings
from access_admin.domain.exceptions import AccessAdminException
from access_admin.infrastructure.persistence import database
from access_admin.infrastructure.persistence.repositories import UserRepository
from access_admin.infrastructure.security.password import BcryptPasswordHasher
from access_admin.schemas.user import CreateUserBaseRequest, UpdateUserRequest
from access_admin.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Create the user through UserService, then grant the super-user flag."""
    if len(sys.argv) < 4:
        print(
            "Usage: python -m scripts.create_superuser <username> <first_name> <last_name> [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    username, first_name, last_name = sys.argv[1:4]
    password = sys.argv[4] if len(sys.argv) > 4 else secrets.token_urlsafe(12)

    settings = get_settings()
    setup_logging()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    hasher = BcryptPasswordHasher(rounds=settings.password_hash_rounds)
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                service = UserService(UserRepository(session), hasher)
                created = await service.create_user_base(
                    CreateUserBaseRequest(
                        username=username,
                        first_name=first_name,
                        last_name=last_name,
                        password=password,
                    )
                )
                user = await service.update_user(
                    created.id, UpdateUserRequest(is_super_user=True)
                )
    except AccessAdminException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose_engine()

    print(f"Created super user: {user.id} ({user.username})")
    if len(sys.argv) <= 4:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
