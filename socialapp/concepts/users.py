from typing import Dict, List
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from .base import DocCollection
from ..auth import hash_password, verify_password
from ..errors import BadValuesError, DuplicateUsernameError, InvalidCredentialsError, NotFoundError
from ..schemas.users import UserUpdate
import logging

logger = logging.getLogger(__name__)

def sanitize_user(user: Dict) -> Dict:
    return {k: v for k, v in user.items() if k != 'password'}

class UserConcept:
    def __init__(self, name: str = 'users'):
        self.users = DocCollection(name)

    async def create(self, username: str, password: str):
        if not username or not password:
            raise BadValuesError("Username and password must be non-empty!")
        await self._ensure_username_free(username)
        try:
            _id = await self.users.create_one({'username': username, 'password': hash_password(password)})
        except DuplicateKeyError:
            raise DuplicateUsernameError(username)
        logger.info({'msg': 'user_created', 'user': str(_id)})
        return {'msg': 'User created successfully!', 'user': await self.get_user_by_id(_id)}

    async def authenticate(self, username: str, password: str) -> Dict:
        user = await self.users.read_one({'username': username})
        if not user or not verify_password(password, user['password']):
            raise InvalidCredentialsError({'username': username})
        return sanitize_user(user)

    async def get_users(self) -> List[Dict]:
        return [sanitize_user(u) for u in await self.users.read_many({})]

    async def get_user_by_id(self, _id: ObjectId) -> Dict:
        user = await self.users.read_one({'_id': _id})
        if not user:
            raise NotFoundError('User', _id)
        return sanitize_user(user)

    async def get_user_by_username(self, username: str) -> Dict:
        user = await self.users.read_one({'username': username})
        if not user:
            raise NotFoundError('User', username)
        return sanitize_user(user)

    async def ids_to_usernames(self, ids: List[ObjectId]) -> List[str]:
        users = await self.users.read_many({'_id': {'$in': list(ids)}})
        by_id = {u['_id']: u['username'] for u in users}
        missing = [i for i in ids if i not in by_id]
        if missing:
            raise NotFoundError('User', missing[0], {'missing': [str(i) for i in missing]})
        return [by_id[i] for i in ids]

    async def update(self, _id: ObjectId, update: UserUpdate):
        fields = update.model_dump(exclude_unset=True, exclude_none=True)
        if 'username' in fields:
            if not fields['username']:
                raise BadValuesError("Username must be non-empty!")
            current = await self.get_user_by_id(_id)
            if fields['username'] != current['username']:
                await self._ensure_username_free(fields['username'])
        if 'password' in fields:
            if not fields['password']:
                raise BadValuesError("Password must be non-empty!")
            fields['password'] = hash_password(fields['password'])
        if not fields:
            return {'msg': 'User updated successfully!'}
        try:
            matched = await self.users.update_one({'_id': _id}, fields)
        except DuplicateKeyError:
            raise DuplicateUsernameError(fields['username'])
        if not matched:
            raise NotFoundError('User', _id)
        return {'msg': 'User updated successfully!'}

    async def delete(self, _id: ObjectId):
        await self.users.delete_one({'_id': _id})
        return {'msg': 'User deleted!'}

    async def _ensure_username_free(self, username: str):
        if await self.users.read_one({'username': username}):
            raise DuplicateUsernameError(username)
