from typing import Dict, List
from bson import ObjectId
from .base import DocCollection
from ..errors import BadValuesError, ForbiddenError, NotFoundError
from ..schemas.statuses import StatusUpdate

class StatusConcept:
    def __init__(self, name: str = 'statuses'):
        self.statuses = DocCollection(name)

    async def create(self, user: ObjectId, content: str):
        if not content:
            raise BadValuesError("Status content must be non-empty!")
        _id = await self.statuses.create_one({'user': user, 'content': content})
        return {'msg': 'Status created!', 'status': await self.statuses.read_one({'_id': _id})}

    async def get_user_status(self, user: ObjectId) -> List[Dict]:
        return await self.statuses.read_many({'user': user})

    async def update(self, _id: ObjectId, update: StatusUpdate):
        fields = update.model_dump(exclude_unset=True, exclude_none=True)
        if 'content' in fields and not fields['content']:
            raise BadValuesError("Content must be non-empty!")
        if fields and not await self.statuses.update_one({'_id': _id}, fields):
            raise NotFoundError('Status', _id)
        return {'msg': 'Status updated!'}

    async def delete(self, _id: ObjectId):
        await self.statuses.delete_one({'_id': _id})
        return {'msg': 'Status deleted!'}

    async def delete_by_user(self, user: ObjectId) -> int:
        return await self.statuses.delete_many({'user': user})

    async def is_user(self, user: ObjectId, _id: ObjectId):
        status = await self.statuses.read_one({'_id': _id})
        if not status:
            raise NotFoundError('Status', _id)
        if status['user'] != user:
            raise ForbiddenError(user, 'status', _id)
