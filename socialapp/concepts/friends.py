"""
Friend graph: accepted friendships and pending requests.

A pair of users is always in exactly one of four states: no relation,
pending in either direction, or friends. Friendships are stored once per
unordered pair (``user1`` < ``user2``); requests are stored per ordered pair
and deleted when they are accepted, rejected or withdrawn.

Transitions on the same pair run under one ``asyncio.Lock`` so two requests
touching the pair cannot interleave their check and write. The unique
indexes created in ``core.ensure_indexes`` cover writers in other processes.
"""
import asyncio
from contextlib import asynccontextmanager
from typing import Dict, List, Tuple
from bson import ObjectId
from pymongo.errors import DuplicateKeyError
from .base import DocCollection
from ..errors import (
    AlreadyFriendsError,
    NoSuchRequestError,
    NotFriendsError,
    RequestAlreadyExistsError,
    SelfRequestError,
)
import logging

logger = logging.getLogger(__name__)

def _ordered(a: ObjectId, b: ObjectId) -> Tuple[ObjectId, ObjectId]:
    return (a, b) if a < b else (b, a)

class FriendConcept:
    def __init__(self, friends: str = 'friends', requests: str = 'friend_requests'):
        self.friends = DocCollection(friends)
        self.requests = DocCollection(requests)
        self._locks: Dict[Tuple[ObjectId, ObjectId], asyncio.Lock] = {}
        self._holders: Dict[Tuple[ObjectId, ObjectId], int] = {}

    @asynccontextmanager
    async def _pair_lock(self, a: ObjectId, b: ObjectId):
        # entries live only while some caller holds or waits on the pair
        key = _ordered(a, b)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._holders[key] = self._holders.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[key] -= 1
            if not self._holders[key]:
                del self._holders[key]
                del self._locks[key]

    async def send_request(self, from_user: ObjectId, to_user: ObjectId):
        if from_user == to_user:
            raise SelfRequestError({'user': str(from_user)})
        async with self._pair_lock(from_user, to_user):
            if await self._are_friends(from_user, to_user):
                raise AlreadyFriendsError(from_user, to_user)
            if await self._pending(from_user, to_user) or await self._pending(to_user, from_user):
                raise RequestAlreadyExistsError(from_user, to_user)
            try:
                await self.requests.create_one({'from': from_user, 'to': to_user, 'status': 'pending'})
            except DuplicateKeyError:
                raise RequestAlreadyExistsError(from_user, to_user)
        logger.info({'msg': 'friend_request_sent', 'from': str(from_user), 'to': str(to_user)})
        return {'msg': 'Sent request!'}

    async def remove_request(self, from_user: ObjectId, to_user: ObjectId):
        async with self._pair_lock(from_user, to_user):
            if not await self.requests.delete_one({'from': from_user, 'to': to_user}):
                raise NoSuchRequestError(from_user, to_user)
        return {'msg': 'Removed request!'}

    async def accept_request(self, from_user: ObjectId, to_user: ObjectId):
        async with self._pair_lock(from_user, to_user):
            if not await self.requests.delete_one({'from': from_user, 'to': to_user}):
                raise NoSuchRequestError(from_user, to_user)
            user1, user2 = _ordered(from_user, to_user)
            try:
                await self.friends.create_one({'user1': user1, 'user2': user2})
            except DuplicateKeyError:
                raise AlreadyFriendsError(from_user, to_user)
        logger.info({'msg': 'friend_request_accepted', 'from': str(from_user), 'to': str(to_user)})
        return {'msg': 'Accepted request!'}

    async def reject_request(self, from_user: ObjectId, to_user: ObjectId):
        async with self._pair_lock(from_user, to_user):
            if not await self.requests.delete_one({'from': from_user, 'to': to_user}):
                raise NoSuchRequestError(from_user, to_user)
        return {'msg': 'Rejected request!'}

    async def remove_friend(self, user: ObjectId, friend: ObjectId):
        user1, user2 = _ordered(user, friend)
        async with self._pair_lock(user, friend):
            if not await self.friends.delete_one({'user1': user1, 'user2': user2}):
                raise NotFriendsError(user, friend)
        return {'msg': 'Unfriended!'}

    async def get_friends(self, user: ObjectId) -> List[ObjectId]:
        # friends are docs where (user1==me) or (user2==me)
        docs = await self.friends.read_many({'$or': [{'user1': user}, {'user2': user}]})
        return [d['user2'] if d['user1'] == user else d['user1'] for d in docs]

    async def get_requests(self, user: ObjectId) -> List[Dict]:
        return await self.requests.read_many({'$or': [{'from': user}, {'to': user}]})

    async def remove_user(self, user: ObjectId):
        friends = await self.friends.delete_many({'$or': [{'user1': user}, {'user2': user}]})
        requests = await self.requests.delete_many({'$or': [{'from': user}, {'to': user}]})
        logger.info({'msg': 'friend_graph_user_removed', 'user': str(user), 'friends': friends, 'requests': requests})

    async def _are_friends(self, a: ObjectId, b: ObjectId) -> bool:
        user1, user2 = _ordered(a, b)
        return await self.friends.read_one({'user1': user1, 'user2': user2}) is not None

    async def _pending(self, from_user: ObjectId, to_user: ObjectId) -> bool:
        return await self.requests.read_one({'from': from_user, 'to': to_user}) is not None
