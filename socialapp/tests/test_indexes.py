import pytest
import pytest_asyncio
from bson import ObjectId

from socialapp import core
from socialapp.concepts import Friend, User
from socialapp.errors import (
    AlreadyFriendsError,
    DuplicateUsernameError,
    RequestAlreadyExistsError,
)
from socialapp.schemas.users import UserUpdate


async def _never(*args):
    """Stand-in for a pre-check that another writer raced past."""
    return False


async def _username_free(username):
    return None


@pytest_asyncio.fixture
async def indexed():
    await core.ensure_indexes()


@pytest.mark.asyncio
async def test_username_index_maps_to_duplicate_on_create(indexed, monkeypatch):
    await User.create('alice', 'pw1')
    monkeypatch.setattr(User, '_ensure_username_free', _username_free)

    with pytest.raises(DuplicateUsernameError):
        await User.create('alice', 'pw2')
    assert [u['username'] for u in await User.get_users()] == ['alice']


@pytest.mark.asyncio
async def test_username_index_maps_to_duplicate_on_update(indexed, monkeypatch):
    alice = (await User.create('alice', 'pw1'))['user']
    await User.create('bob', 'pw2')
    monkeypatch.setattr(User, '_ensure_username_free', _username_free)

    with pytest.raises(DuplicateUsernameError):
        await User.update(alice['_id'], UserUpdate(username='bob'))
    assert (await User.get_user_by_id(alice['_id']))['username'] == 'alice'


@pytest.mark.asyncio
async def test_request_index_maps_to_request_exists(indexed, monkeypatch):
    a, b = ObjectId(), ObjectId()
    await Friend.send_request(a, b)
    monkeypatch.setattr(Friend, '_pending', _never)

    with pytest.raises(RequestAlreadyExistsError):
        await Friend.send_request(a, b)
    assert len(await Friend.get_requests(b)) == 1


@pytest.mark.asyncio
async def test_friendship_index_maps_to_already_friends(indexed):
    a, b = ObjectId(), ObjectId()
    await Friend.send_request(a, b)
    await Friend.accept_request(a, b)

    # a request written by another process before it saw the friendship
    await Friend.requests.create_one({'from': a, 'to': b, 'status': 'pending'})

    with pytest.raises(AlreadyFriendsError):
        await Friend.accept_request(a, b)
    assert await Friend.get_friends(a) == [b]
