import pytest
from bson import ObjectId

from socialapp.concepts import User
from socialapp.errors import (
    BadValuesError,
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
)
from socialapp.schemas.users import UserUpdate


@pytest.mark.asyncio
async def test_create_then_lookup_by_username():
    created = await User.create('alice', 'pw1')
    assert created['user']['username'] == 'alice'
    assert 'password' not in created['user']

    user = await User.get_user_by_username('alice')
    assert user['_id'] == created['user']['_id']
    assert user['username'] == 'alice'


@pytest.mark.asyncio
async def test_duplicate_username_rejected():
    await User.create('alice', 'pw1')
    with pytest.raises(DuplicateUsernameError):
        await User.create('alice', 'other')


@pytest.mark.asyncio
@pytest.mark.parametrize('username,password', [('', 'pw'), ('alice', '')])
async def test_empty_credentials_rejected(username, password):
    with pytest.raises(BadValuesError):
        await User.create(username, password)


@pytest.mark.asyncio
async def test_password_is_hashed():
    created = await User.create('alice', 'pw1')
    stored = await User.users.read_one({'_id': created['user']['_id']})
    assert stored['password'] != 'pw1'


@pytest.mark.asyncio
async def test_authenticate():
    await User.create('alice', 'pw1')
    user = await User.authenticate('alice', 'pw1')
    assert user['username'] == 'alice'
    assert 'password' not in user

    with pytest.raises(InvalidCredentialsError):
        await User.authenticate('alice', 'wrong')
    with pytest.raises(InvalidCredentialsError):
        await User.authenticate('nobody', 'pw1')


@pytest.mark.asyncio
async def test_lookup_misses():
    with pytest.raises(NotFoundError):
        await User.get_user_by_username('ghost')
    with pytest.raises(NotFoundError):
        await User.get_user_by_id(ObjectId())


@pytest.mark.asyncio
async def test_update_username_checks_uniqueness():
    alice = (await User.create('alice', 'pw1'))['user']
    await User.create('bob', 'pw2')

    with pytest.raises(DuplicateUsernameError):
        await User.update(alice['_id'], UserUpdate(username='bob'))

    # keeping the same name is not a conflict
    await User.update(alice['_id'], UserUpdate(username='alice'))

    await User.update(alice['_id'], UserUpdate(username='alicia'))
    assert (await User.get_user_by_id(alice['_id']))['username'] == 'alicia'


@pytest.mark.asyncio
async def test_update_password_rehashes():
    alice = (await User.create('alice', 'pw1'))['user']
    await User.update(alice['_id'], UserUpdate(password='pw9'))

    await User.authenticate('alice', 'pw9')
    with pytest.raises(InvalidCredentialsError):
        await User.authenticate('alice', 'pw1')


@pytest.mark.asyncio
async def test_ids_to_usernames_keeps_order():
    alice = (await User.create('alice', 'pw1'))['user']
    bob = (await User.create('bob', 'pw2'))['user']

    assert await User.ids_to_usernames([bob['_id'], alice['_id']]) == ['bob', 'alice']
    assert await User.ids_to_usernames([]) == []

    with pytest.raises(NotFoundError):
        await User.ids_to_usernames([alice['_id'], ObjectId()])


@pytest.mark.asyncio
async def test_delete_removes_record():
    alice = (await User.create('alice', 'pw1'))['user']
    await User.delete(alice['_id'])
    with pytest.raises(NotFoundError):
        await User.get_user_by_id(alice['_id'])
