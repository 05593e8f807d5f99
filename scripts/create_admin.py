#!/usr/bin/env python3
"""
Script to bootstrap an administrator account.

The HTTP API only lets an existing admin mint another admin, so the first one
comes from here. An existing user with the given email is promoted instead.

Usage:
  python scripts/create_admin.py --email admin@example.com --first-name Ada --last-name Admin

The password is prompted for unless --password is passed.
"""

import asyncio
import getpass
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pedigree.application import audit
from pedigree.application.actor import Actor
from pedigree.application.use_cases.auth.register_user import MIN_PASSWORD_LENGTH
from pedigree.config.settings import get_settings
from pedigree.domain.models.user import User
from pedigree.domain.value_objects.audit_action import AuditAction
from pedigree.domain.value_objects.role import Role
from pedigree.infrastructure.auth.password import PasswordHasher
from pedigree.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_admin(email: str, password: str | None, first_name: str, last_name: str):
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    password_hasher = PasswordHasher()
    email = email.strip().lower()

    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            existing = await uow.users.get_by_email(email)
            if existing:
                if existing.role is Role.ADMIN:
                    print(f"ℹ️  {email} is already an administrator (ID: {existing.id})")
                    return
                promoted = await uow.users.update(
                    existing.id,
                    {
                        "role": Role.ADMIN,
                        "is_active": True,
                        "updated_at": datetime.now(timezone.utc),
                    },
                )
                await audit.record(
                    uow,
                    actor=Actor(user_id=existing.id, role=Role.ADMIN),
                    action=AuditAction.UPDATE,
                    entity_type="User",
                    entity_id=existing.id,
                    before=existing,
                    after=promoted,
                    metadata={"created_via": "cli"},
                )
                await uow.commit()
                print(f"\n✅ Promoted {email} to ADMIN (ID: {existing.id})")
                return

            if password is None:
                password = getpass.getpass("Password: ")
            if len(password) < MIN_PASSWORD_LENGTH:
                print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters long")
                sys.exit(1)
            user = await uow.users.add(
                User.create(
                    email=email,
                    hashed_password=password_hasher.hash(password),
                    first_name=first_name,
                    last_name=last_name,
                    role=Role.ADMIN,
                )
            )
            await audit.record(
                uow,
                actor=Actor(user_id=user.id, role=Role.ADMIN),
                action=AuditAction.CREATE,
                entity_type="User",
                entity_id=user.id,
                after=user,
                metadata={"created_via": "cli"},
            )
            await uow.commit()

        print("\n✅ Administrator created successfully!")
        print(f"   User ID: {user.id}")
        print(f"   Email: {user.email}")
    except Exception as exc:
        print(f"\n❌ Error creating administrator: {exc}")
        import traceback

        traceback.print_exc()
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create or promote an administrator account")
    parser.add_argument("--email", required=True, help="Email of the administrator")
    parser.add_argument("--first-name", default="Registry", help="First name for a new account")
    parser.add_argument("--last-name", default="Admin", help="Last name for a new account")
    parser.add_argument("--password", help="Password (prompted for when omitted)")

    args = parser.parse_args()

    print("=" * 60)
    print("🚀 Administrator bootstrap - Pedigree Registry")
    print("=" * 60)

    asyncio.run(create_admin(args.email, args.password, args.first_name, args.last_name))
