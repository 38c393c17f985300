"""
Reset the users and projects collections and load the sample data set.

    python test-scripts/seed_database.py
"""
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import asyncio

from app.database.conn import mongo_client
from app.database.schema import ensure_collections_and_indexes
from app.database.store import get_project_store, get_user_store
from app.models.project.project import Project
from app.models.user.user import User
from app.services.project_management.project import create_project_helper
from app.services.user_management.user_helper import create_user_helper
from app.utils.logger_utils import logger
from config import database_config

USERS = [
    {"email": "admin@example.com", "password": "admin123", "name": "Admin User", "role": "admin"},
    {"email": "user@example.com", "password": "user123", "name": "Regular User", "role": "user"},
    {"email": "rajesh.kumar@adani.com", "password": "rajesh123", "name": "Rajesh Kumar", "role": "admin"},
    {"email": "priya.sharma@seci.co.in", "password": "priya123", "name": "Priya Sharma", "role": "user"},
    {"email": "amit.patel@suzlon.com", "password": "amit123", "name": "Amit Patel", "role": "user"},
    {"email": "sunita.reddy@kpcl.gov.in", "password": "sunita123", "name": "Sunita Reddy", "role": "user"},
    {"email": "vikram.singh@thdc.co.in", "password": "vikram123", "name": "Vikram Singh", "role": "admin"},
]

PROJECTS = [
    ("Bhadla Solar Park", "Rajasthan Solar Park Development Company", "solar", 2245, "Rajasthan, India", "operational", 2021, 27.5330, 71.9084),
    ("Pavagada Solar Park", "Karnataka Solar Power Development Corporation", "solar", 2050, "Karnataka, India", "operational", 2019, 14.1223, 77.2858),
    ("Kurnool Ultra Mega Solar Park", "Andhra Pradesh Solar Power Corporation", "solar", 1000, "Andhra Pradesh, India", "operational", 2017, 15.6295, 77.4086),
    ("Rewa Ultra Mega Solar Park", "Rewa Ultra Mega Solar Limited", "solar", 750, "Madhya Pradesh, India", "operational", 2018, 24.0798, 81.3241),
    ("Muppandal Wind Farm", "Tamil Nadu Energy Development Agency", "wind", 1500, "Tamil Nadu, India", "operational", 2000, 8.2472, 77.4825),
    ("Jaisalmer Wind Park", "Suzlon Energy", "wind", 1064, "Rajasthan, India", "operational", 2012, 26.9124, 70.9624),
    ("Brahmaputra Hydroelectric Project", "NHPC Limited", "hydro", 2800, "Assam, India", "planning", 2027, 27.5336, 94.8200),
    ("Tehri Dam", "THDC India Ltd", "hydro", 2400, "Uttarakhand, India", "operational", 2006, 30.3787, 78.4802),
    ("Narmada Valley Biomass Plant", "Madhya Pradesh Bioenergy Development Corporation", "biomass", 50, "Madhya Pradesh, India", "in-progress", 2023, 22.3148, 75.0412),
    ("Puga Valley Geothermal Project", "ONGC Energy", "geothermal", 20, "Ladakh, India", "planning", 2025, 33.1825, 78.3859),
    ("Mumbai Offshore Wind Project", "National Institute of Wind Energy", "wind", 1000, "Maharashtra, India", "planning", 2026, 19.1231, 72.8308),
    ("Charanka Solar Park", "Gujarat Power Corporation Limited", "solar", 600, "Gujarat, India", "operational", 2016, 23.8948, 71.1513),
]


async def main() -> None:
    await mongo_client.connect()
    try:
        await ensure_collections_and_indexes()
        db = mongo_client.database
        await db[database_config["USER_COLLECTION"]].delete_many({})
        await db[database_config["PROJECT_COLLECTION"]].delete_many({})
        logger.info("Cleared users and projects collections")

        user_store = get_user_store()
        for user in USERS:
            await create_user_helper(user_store, User(**user))

        project_store = get_project_store()
        for name, owner, energy_type, capacity, location, status, year, lat, lng in PROJECTS:
            await create_project_helper(project_store, Project(
                name=name,
                owner=owner,
                energy_type=energy_type,
                capacity=capacity,
                location=location,
                status=status,
                year=year,
                latitude=lat,
                longitude=lng,
            ))
        logger.info(f"Seeded {len(USERS)} users and {len(PROJECTS)} projects")
    finally:
        await mongo_client.close()


if __name__ == "__main__":
    asyncio.run(main())
