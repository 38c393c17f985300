from typing import Any, Dict

from app.database.conn import mongo_client
from app.utils.logger_utils import logger
from config import database_config

ENERGY_TYPES = ["solar", "wind", "hydro", "biomass", "geothermal", "other"]
PROJECT_STATUSES = ["planning", "in-progress", "operational", "decommissioned"]
ROLES = ["user", "admin"]


def _project_validator() -> Dict[str, Any]:
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": [
                "name",
                "owner",
                "energy_type",
                "capacity",
                "location",
                "status",
                "year",
                "created_at",
            ],
            "properties": {
                "name": {"bsonType": "string", "minLength": 1},
                "owner": {"bsonType": "string", "minLength": 1},
                "energy_type": {"enum": ENERGY_TYPES},
                "capacity": {"bsonType": ["double", "int", "long", "decimal"], "minimum": 0},
                "location": {"bsonType": "string", "minLength": 1},
                "status": {"enum": PROJECT_STATUSES},
                "year": {"bsonType": ["int", "long"]},
                "latitude": {"bsonType": ["double", "int", "null"], "minimum": -90, "maximum": 90},
                "longitude": {"bsonType": ["double", "int", "null"], "minimum": -180, "maximum": 180},
                "created_at": {"bsonType": "date"},
                "updated_at": {"bsonType": ["date", "null"]},
            },
        }
    }


def _user_validator() -> Dict[str, Any]:
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": ["name", "email", "password", "role", "created_at"],
            "properties": {
                "name": {"bsonType": "string"},
                "email": {"bsonType": "string"},
                # bcrypt hash, never plaintext
                "password": {"bsonType": "string", "pattern": "^\\$2[aby]\\$"},
                "role": {"enum": ROLES},
                "created_at": {"bsonType": "date"},
                "updated_at": {"bsonType": ["date", "null"]},
            },
        }
    }


async def ensure_collections_and_indexes() -> None:
    """Create collections with validators and ensure indexes exist.

    This is idempotent and safe to call on every startup.
    """
    db = mongo_client.database

    collections: Dict[str, Dict[str, Any]] = {
        database_config["PROJECT_COLLECTION"]: _project_validator(),
        database_config["USER_COLLECTION"]: _user_validator(),
    }

    existing = await db.list_collection_names()

    for name, validator in collections.items():
        if name not in existing:
            await db.create_collection(name, validator=validator)
            logger.info(f"Created collection {name} with validator")
        else:
            await db.command({
                "collMod": name,
                "validator": validator,
                "validationLevel": "moderate",
            })
            logger.info(f"Updated validator for collection {name}")

    users = db[database_config["USER_COLLECTION"]]
    await users.create_index("email", unique=True, name="uniq_user_email")

    projects = db[database_config["PROJECT_COLLECTION"]]
    await projects.create_index("energy_type", name="idx_project_energy_type")
    await projects.create_index("status", name="idx_project_status")
    await projects.create_index([("location", "text")], name="txt_project_location")
    await projects.create_index([("created_at", 1)], name="idx_project_created_at")
