import os
import sys
from typing import NoReturn

# Ensure repo root on sys.path so we can import config/app modules when run from test-scripts
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import asyncio
from getpass import getpass

from app.database.conn import mongo_client
from app.database.store import get_user_store
from app.models.user.user import Role, User
from app.services.user_management.user_helper import create_user_helper


async def main() -> NoReturn:
    email = os.getenv("SEED_ADMIN_EMAIL") or input("Admin email: ")
    password = os.getenv("SEED_ADMIN_PASSWORD") or getpass("Admin password: ")
    name = os.getenv("SEED_ADMIN_NAME") or input("Admin name: ") or "Admin User"

    await mongo_client.connect()
    try:
        admin = User(email=email, password=password, name=name, role=Role.ADMIN)
        created = await create_user_helper(get_user_store(), admin)
        print({"_id": created.id, "email": created.email, "name": created.name, "role": created.role.value})
    finally:
        await mongo_client.close()


if __name__ == "__main__":
    asyncio.run(main())
