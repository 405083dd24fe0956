from bson import ObjectId
from .base import DocCollection
from ..errors import AlreadyAuthenticatedError, UnauthenticatedError

class WebSessionConcept:
    """Binds opaque session handles to the logged-in user."""

    def __init__(self, name: str = 'sessions'):
        self.sessions = DocCollection(name)

    async def start(self, session: str, user: ObjectId):
        # overwrite allowed; a second login on the same handle rebinds it
        res = await self.sessions.update_one({'_id': session}, {'user': user})
        if not res:
            await self.sessions.create_one({'_id': session, 'user': user})

    async def get_user(self, session: str) -> ObjectId:
        doc = await self.sessions.read_one({'_id': session})
        if not doc or doc.get('user') is None:
            raise UnauthenticatedError()
        return doc['user']

    async def is_logged_out(self, session: str):
        doc = await self.sessions.read_one({'_id': session})
        if doc and doc.get('user') is not None:
            raise AlreadyAuthenticatedError({'session_user': str(doc['user'])})

    async def end(self, session: str):
        await self.sessions.delete_one({'_id': session})

    async def end_all(self, user: ObjectId) -> int:
        return await self.sessions.delete_many({'user': user})
