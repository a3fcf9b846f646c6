#!/usr/bin/env python3
"""
Management commands for the task manager backend.
Creates the schema and provisions gestor and admin accounts, which the
public registration endpoint never hands out.

Usage: python -m taskmanager.manage [command]
"""

import getpass
import sys
from typing import Callable, List, Optional

from sqlalchemy.orm import Session

from taskmanager.application.services.auth_service import AuthService
from taskmanager.domain.models.base import DomainException
from taskmanager.domain.models.user import User, UserRole
from taskmanager.infrastructure.auth import PasswordHasher, get_jwt_handler
from taskmanager.infrastructure.db.database import SessionLocal, create_all_tables
from taskmanager.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

ROLE_NAMES = [role.value for role in UserRole]


def init_database():
    """Create every table that does not exist yet."""
    print("Creating tables...")
    create_all_tables()


def create_user(
    email: str,
    name: str,
    role: str,
    password: str,
    session_factory: Callable[[], Session] = SessionLocal,
    password_hasher: Optional[PasswordHasher] = None
) -> User:
    """Store an account with the given role and return it."""
    session = session_factory()
    try:
        service = AuthService(
            SQLAlchemyUserRepository(session),
            password_hasher or PasswordHasher(),
            get_jwt_handler()
        )
        return service.create_user(name, email, password, UserRole(role))
    finally:
        session.close()


def print_usage():
    print("Usage: python -m taskmanager.manage [command]")
    print("Commands:")
    print("  init-db                                    - Create all tables")
    print("  create-user <email> <name> <role> [pass]   - Create an account; role is one of "
          + ", ".join(ROLE_NAMES))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print_usage()
        return 1

    command_name = args[0]

    if command_name == "init-db":
        init_database()
    elif command_name == "create-user":
        if len(args) < 4:
            print_usage()
            return 1
        email, name, role = args[1:4]
        if role not in ROLE_NAMES:
            print(f"Unknown role: {role} (expected one of {', '.join(ROLE_NAMES)})")
            return 1
        password = args[4] if len(args) > 4 else getpass.getpass("Password: ")
        if len(password) < 6:
            print("Password must have at least 6 characters")
            return 1

        init_database()
        try:
            user = create_user(email, name, role, password)
        except DomainException as e:
            print(f"Could not create user: {e.message}")
            return 1
        print(f"Created {user.role.value} {user.email} with id {user.id}")
    else:
        print(f"Unknown command: {command_name}")
        print_usage()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
