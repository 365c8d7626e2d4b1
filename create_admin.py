"""
Script to provision an admin account from the command line.

Admin routes require a superadmin token, so the first superadmin has to be
created here rather than through the API. Input goes through the same
validation as POST /admins, so the stored email matches what login looks up.

Run this script from the project root:
    python create_admin.py admin@example.com "Site Admin" --role superadmin
"""

import argparse
import getpass
import os
import sys

from pydantic import ValidationError

# Add project root to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from jobify.core.database import SessionLocal
from jobify.core.exceptions import ConflictError
from jobify.crud import principal as principal_crud
from jobify.models import Admin, AdminRole
from jobify.schemas.admin import AdminCreateRequest


def create_admin(email: str, name: str, password: str, role: AdminRole) -> Admin:
    """
    Validate and insert the admin record.

    Raises:
        ValidationError: If the email, name or password is not acceptable
        ConflictError: If the email is already taken
    """
    request = AdminCreateRequest(email=email, name=name, password=password, role=role)

    db = SessionLocal()
    try:
        return principal_crud.create(db, Admin, request.model_dump())
    finally:
        db.close()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create a Jobify admin account")
    parser.add_argument("email")
    parser.add_argument("name")
    parser.add_argument(
        "--role",
        choices=[r.value for r in AdminRole],
        default=AdminRole.SUPERADMIN.value,
    )
    args = parser.parse_args(argv)

    password = getpass.getpass("Password: ")
    if password != getpass.getpass("Confirm password: "):
        print("✗ Passwords do not match")
        return 1

    try:
        admin = create_admin(args.email, args.name, password, AdminRole(args.role))
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            print(f"✗ {field}: {error['msg']}")
        return 1
    except ConflictError:
        print(f"✗ An admin with email {args.email} already exists")
        return 1

    print(f"✓ Created {admin.role.value} {admin.email} (ID: {admin.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
