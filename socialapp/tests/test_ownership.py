import pytest
from bson import ObjectId

from socialapp.concepts import Message, Post, Status
from socialapp.errors import BadValuesError, ForbiddenError, NotFoundError
from socialapp.schemas.messages import MessageUpdate
from socialapp.schemas.posts import PostOptions, PostUpdate
from socialapp.schemas.statuses import StatusUpdate


@pytest.fixture
def users():
    return ObjectId(), ObjectId()


@pytest.mark.asyncio
async def test_post_guard(users):
    x, y = users
    post = (await Post.create(x, 'hello', PostOptions(backgroundColor='#fff')))['post']
    assert post['options'] == {'backgroundColor': '#fff'}

    with pytest.raises(ForbiddenError):
        await Post.is_author(y, post['_id'])
    with pytest.raises(NotFoundError):
        await Post.is_author(x, ObjectId())

    await Post.is_author(x, post['_id'])
    await Post.update(post['_id'], PostUpdate(content='edited'))
    posts = await Post.get_by_author(x)
    assert [p['content'] for p in posts] == ['edited']
    assert posts[0]['dateUpdated'] >= posts[0]['dateCreated']

    await Post.delete(post['_id'])
    assert await Post.get_by_author(x) == []


@pytest.mark.asyncio
async def test_post_needs_content(users):
    with pytest.raises(BadValuesError):
        await Post.create(users[0], '')


@pytest.mark.asyncio
async def test_get_posts_filters_by_author(users):
    x, y = users
    await Post.create(x, 'one')
    await Post.create(y, 'two')
    assert len(await Post.get_posts({})) == 2
    assert [p['content'] for p in await Post.get_by_author(y)] == ['two']


@pytest.mark.asyncio
async def test_status_guard(users):
    x, y = users
    status = (await Status.create(x, 'listening'))['status']

    with pytest.raises(ForbiddenError):
        await Status.is_user(y, status['_id'])

    await Status.is_user(x, status['_id'])
    await Status.update(status['_id'], StatusUpdate(content='away'))
    assert [s['content'] for s in await Status.get_user_status(x)] == ['away']

    await Status.delete(status['_id'])
    assert await Status.get_user_status(x) == []


@pytest.mark.asyncio
async def test_message_guard(users):
    x, y = users
    message = (await Message.send_message(x, [y], 'hi'))['message']

    with pytest.raises(ForbiddenError):
        await Message.is_sender(y, message['_id'])

    await Message.is_sender(x, message['_id'])
    await Message.update(message['_id'], MessageUpdate(content='hey'))
    received = await Message.get_by_user(y)
    assert [m['content'] for m in received] == ['hey']
    assert await Message.get_by_user(x) == received

    await Message.delete(message['_id'])
    assert await Message.get_by_user(y) == []


@pytest.mark.asyncio
async def test_message_needs_recipients(users):
    with pytest.raises(BadValuesError):
        await Message.send_message(users[0], [], 'hi')


@pytest.mark.asyncio
async def test_message_remove_user(users):
    x, y = users
    z = ObjectId()
    await Message.send_message(x, [y], 'from x')
    await Message.send_message(y, [x, z], 'from y')

    await Message.remove_user(x)
    remaining = await Message.get_by_user(z)
    assert [m['content'] for m in remaining] == ['from y']
    assert remaining[0]['recipients'] == [z]
    assert await Message.get_by_user(x) == []


@pytest.mark.asyncio
async def test_updates_reject_empty_content(users):
    x, y = users
    post = (await Post.create(x, 'hello'))['post']
    status = (await Status.create(x, 'online'))['status']
    message = (await Message.send_message(x, [y], 'hi'))['message']

    with pytest.raises(BadValuesError):
        await Post.update(post['_id'], PostUpdate(content=''))
    with pytest.raises(BadValuesError):
        await Status.update(status['_id'], StatusUpdate(content=''))
    with pytest.raises(BadValuesError):
        await Message.update(message['_id'], MessageUpdate(content=''))

    assert [p['content'] for p in await Post.get_by_author(x)] == ['hello']
    assert [s['content'] for s in await Status.get_user_status(x)] == ['online']
    assert [m['content'] for m in await Message.get_by_user(y)] == ['hi']
