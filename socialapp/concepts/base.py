from datetime import datetime
from typing import Any, Dict, List, Optional
from bson import ObjectId
from bson.errors import InvalidId
from .. import core
from ..errors import BadValuesError

def parse_id(value) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise BadValuesError(f"{value} is not a valid id!", {'id': str(value)})

class DocCollection:
    """
    Timestamped wrapper around one Mongo collection.

    The collection is looked up on every access so the client installed in
    ``core`` can change between startup and tests.
    """

    def __init__(self, name: str):
        self.name = name

    @property
    def collection(self):
        return core.get_db()[self.name]

    async def create_one(self, item: Dict[str, Any]) -> ObjectId:
        now = datetime.utcnow()
        doc = {**item, 'dateCreated': now, 'dateUpdated': now}
        res = await self.collection.insert_one(doc)
        return res.inserted_id

    async def read_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one(query)

    async def read_many(self, query: Dict[str, Any], limit: int = 0) -> List[Dict[str, Any]]:
        cursor = self.collection.find(query, sort=[('dateUpdated', -1)], limit=limit)
        return await cursor.to_list(length=None)

    async def update_one(self, query: Dict[str, Any], update: Dict[str, Any]) -> int:
        res = await self.collection.update_one(query, {'$set': {**update, 'dateUpdated': datetime.utcnow()}})
        return res.matched_count

    async def delete_one(self, query: Dict[str, Any]) -> int:
        res = await self.collection.delete_one(query)
        return res.deleted_count

    async def delete_many(self, query: Dict[str, Any]) -> int:
        res = await self.collection.delete_many(query)
        return res.deleted_count

    async def pull(self, query: Dict[str, Any], field: str, value: Any) -> int:
        res = await self.collection.update_many(
            query, {'$pull': {field: value}, '$set': {'dateUpdated': datetime.utcnow()}}
        )
        return res.modified_count
