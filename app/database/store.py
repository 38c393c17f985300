import copy
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from app.database.conn import mongo_client
from config import database_config

# ---------- Entity Stores ----------#
# Records are plain dicts keyed in snake_case with a string "_id".

_IMMUTABLE_FIELDS = ("_id", "created_at")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class EntityStore(ABC):
    """Create/read/update/delete by identifier over one entity type."""

    @abstractmethod
    async def list(self) -> List[Dict[str, Any]]:
        """Return every record, oldest first."""

    @abstractmethod
    async def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        ...

    @abstractmethod
    async def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        ...

    @abstractmethod
    async def find_one(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        ...


class InMemoryEntityStore(EntityStore):
    """Dict-backed store. Each instance is isolated; records are copied in and out."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    async def list(self) -> List[Dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self._records.values()]

    async def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        doc = {k: v for k, v in copy.deepcopy(record).items() if k not in _IMMUTABLE_FIELDS}
        doc["_id"] = str(ObjectId())
        doc["created_at"] = _now()
        doc["updated_at"] = doc["created_at"]
        self._records[doc["_id"]] = doc
        return copy.deepcopy(doc)

    async def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        doc = self._records.get(record_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        doc = self._records.get(record_id)
        if doc is None:
            return None
        doc.update({k: v for k, v in copy.deepcopy(fields).items() if k not in _IMMUTABLE_FIELDS})
        doc["updated_at"] = _now()
        return copy.deepcopy(doc)

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    async def find_one(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        for doc in self._records.values():
            if doc.get(field) == value:
                return copy.deepcopy(doc)
        return None


class MongoEntityStore(EntityStore):
    """Store over a single MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    @staticmethod
    def _out(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if doc is not None:
            doc["_id"] = str(doc["_id"])
        return doc

    async def list(self) -> List[Dict[str, Any]]:
        cursor = self._collection.find({}).sort([("created_at", 1), ("_id", 1)])
        return [self._out(doc) async for doc in cursor]

    async def create(self, record: Dict[str, Any]) -> Dict[str, Any]:
        doc = {k: v for k, v in record.items() if k not in _IMMUTABLE_FIELDS}
        doc["created_at"] = _now()
        doc["updated_at"] = doc["created_at"]
        result = await self._collection.insert_one(doc)
        doc["_id"] = str(result.inserted_id)
        return doc

    async def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        if not ObjectId.is_valid(record_id):
            return None
        return self._out(await self._collection.find_one({"_id": ObjectId(record_id)}))

    async def update(self, record_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        if not ObjectId.is_valid(record_id):
            return None
        update_data = {k: v for k, v in fields.items() if k not in _IMMUTABLE_FIELDS}
        update_data["updated_at"] = _now()
        res = await self._collection.update_one({"_id": ObjectId(record_id)}, {"$set": update_data})
        if res.matched_count == 0:
            return None
        return await self.get(record_id)

    async def delete(self, record_id: str) -> bool:
        if not ObjectId.is_valid(record_id):
            return False
        res = await self._collection.delete_one({"_id": ObjectId(record_id)})
        return res.deleted_count > 0

    async def find_one(self, field: str, value: Any) -> Optional[Dict[str, Any]]:
        return self._out(await self._collection.find_one({field: value}))


# ---------- FastAPI dependencies ----------#

def get_project_store() -> EntityStore:
    return MongoEntityStore(mongo_client.collection(database_config["PROJECT_COLLECTION"]))


def get_user_store() -> EntityStore:
    return MongoEntityStore(mongo_client.collection(database_config["USER_COLLECTION"]))
