import os
import sys

from sqlmodel import Session

# Add current directory to path
sys.path.append(os.getcwd())

from junkcrm.core.security import get_password_hash
from junkcrm.db import storage
from junkcrm.db.session import engine, init_db
from junkcrm.models.user import UserRole


def create_initial_user():
    print("--- Initial Admin Creation ---")

    username = os.getenv("FIRST_ADMIN_USERNAME", "admin")
    password = os.getenv("FIRST_ADMIN_PASSWORD", "adminpassword")

    init_db()
    with Session(engine) as session:
        # The first account is the admin; after that users are added through the API
        if storage.users.count(session) > 0:
            print("Users already exist. Register additional users as an admin via /api/auth/register.")
            return

        print(f"Creating admin {username}...")
        storage.users.create(session, {
            "username": username,
            "password": get_password_hash(password),
            "role": UserRole.ADMIN,
        })
        print("Initial admin created successfully!")
        print(f"Username: {username}")
        print(f"Password: {password}")


if __name__ == "__main__":
    create_initial_user()
