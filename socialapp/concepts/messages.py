from typing import Dict, List
from bson import ObjectId
from .base import DocCollection
from ..errors import BadValuesError, ForbiddenError, NotFoundError
from ..schemas.messages import MessageUpdate

class MessageConcept:
    def __init__(self, name: str = 'messages'):
        self.messages = DocCollection(name)

    async def send_message(self, sender: ObjectId, recipients: List[ObjectId], content: str):
        if not recipients:
            raise BadValuesError("A message needs at least one recipient!")
        if not content:
            raise BadValuesError("Message content must be non-empty!")
        _id = await self.messages.create_one({'sender': sender, 'recipients': list(recipients), 'content': content})
        return {'msg': 'Message sent!', 'message': await self.messages.read_one({'_id': _id})}

    async def get_by_user(self, user: ObjectId) -> List[Dict]:
        """Messages the user sent or received, newest first."""
        return await self.messages.read_many({'$or': [{'sender': user}, {'recipients': user}]})

    async def update(self, _id: ObjectId, update: MessageUpdate):
        fields = update.model_dump(exclude_unset=True, exclude_none=True)
        if 'content' in fields and not fields['content']:
            raise BadValuesError("Content must be non-empty!")
        if fields and not await self.messages.update_one({'_id': _id}, fields):
            raise NotFoundError('Message', _id)
        return {'msg': 'Message edited!'}

    async def delete(self, _id: ObjectId):
        await self.messages.delete_one({'_id': _id})
        return {'msg': 'Message deleted!'}

    async def remove_user(self, user: ObjectId):
        await self.messages.delete_many({'sender': user})
        await self.messages.pull({'recipients': user}, 'recipients', user)

    async def is_sender(self, user: ObjectId, _id: ObjectId):
        message = await self.messages.read_one({'_id': _id})
        if not message:
            raise NotFoundError('Message', _id)
        if message['sender'] != user:
            raise ForbiddenError(user, 'message', _id)
