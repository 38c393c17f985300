import json
import os
from dotenv import load_dotenv
load_dotenv()


def _get_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {key} must be a number") from exc


MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")

database_config = {
    "MONGO_URI": MONGO_URI,
    "DB_NAME": os.getenv("DB_NAME", "renewable_energy_dashboard"),
    "USER_COLLECTION": "users",
    "PROJECT_COLLECTION": "projects",
}

JWT_CONFIG = {
    "JWT_SECRET_KEY": os.getenv("JWT_SECRET_KEY", "change-me"),
    "JWT_REFRESH_SECRET_KEY": os.getenv("JWT_REFRESH_SECRET_KEY", "change-me-too"),
    "JWT_ALGORITHM": os.getenv("JWT_ALGORITHM", "HS256"),
    "ACCESS_TOKEN_EXPIRE_MINUTES": int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)),
    "REFRESH_TOKEN_EXPIRE_DAYS": int(os.getenv("REFRESH_TOKEN_EXPIRE_DAYS", 7)),
}

# No historical snapshots are kept, so period-over-period deltas are supplied here.
STATS_CONFIG = {
    "PERCENTAGE_CHANGES": {
        "projects": _get_float("STATS_CHANGE_PROJECTS", 15.2),
        "capacity": _get_float("STATS_CHANGE_CAPACITY", 22.7),
        "locations": _get_float("STATS_CHANGE_LOCATIONS", 8.4),
        "operational": _get_float("STATS_CHANGE_OPERATIONAL", 12.9),
    }
}

_DEFAULT_CAPACITY_TRENDS = [
    {"month": "Jan", "capacity": 1200},
    {"month": "Feb", "capacity": 1350},
    {"month": "Mar", "capacity": 1500},
    {"month": "Apr", "capacity": 1750},
    {"month": "May", "capacity": 2000},
    {"month": "Jun", "capacity": 2200},
]

CHART_CONFIG = {
    # JSON list of {"month": str, "capacity": number}
    "CAPACITY_TRENDS": json.loads(os.getenv("CHART_CAPACITY_TRENDS", "null")) or _DEFAULT_CAPACITY_TRENDS,
}

ENERGY_API_CONFIG = {
    "BASE_URL": os.getenv("ENERGY_API_BASE_URL", "https://developer.nrel.gov/api"),
    "API_KEY": os.getenv("NREL_API_KEY") or os.getenv("ENERGY_API_KEY") or "DEMO_KEY",
    "LIMIT": int(os.getenv("ENERGY_API_LIMIT", 100)),
    "TIMEOUT_SECONDS": _get_float("ENERGY_API_TIMEOUT_SECONDS", 30.0),
}

_origins = os.getenv("CORS_ALLOW_ORIGINS")
CORS_CONFIG = {
    "ALLOW_ORIGINS": [item.strip() for item in _origins.split(",") if item.strip()] if _origins else ["*"],
}
