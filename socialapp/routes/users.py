from fastapi import Depends
from ..auth import get_session
from ..concepts import Friend, Message, Post, Status, User, WebSession
from ..responses import to_json
from ..schemas.users import ActionOkOut, LoginIn, RegisterIn, UserUpdate
import logging

logger = logging.getLogger(__name__)


async def get_session_user(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return to_json(await User.get_user_by_id(user))


async def get_users():
    return to_json(await User.get_users())


async def get_user(username: str):
    return to_json(await User.get_user_by_username(username))


async def create_user(payload: RegisterIn, session: str = Depends(get_session)):
    await WebSession.is_logged_out(session)
    return to_json(await User.create(payload.username, payload.password))


async def update_user(payload: UserUpdate, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return await User.update(user, payload)


async def delete_user(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)

    # Remove everything that references the account before the account itself
    await WebSession.end_all(user)
    await Friend.remove_user(user)
    await Post.delete_by_author(user)
    await Status.delete_by_user(user)
    await Message.remove_user(user)

    logger.info({'msg': 'user_deleted', 'user': str(user)})
    return await User.delete(user)


async def log_in(payload: LoginIn, session: str = Depends(get_session)):
    u = await User.authenticate(payload.username, payload.password)
    await WebSession.start(session, u['_id'])
    logger.info({'msg': 'user_logged_in', 'user': str(u['_id'])})
    return {'msg': 'Logged in!'}


async def log_out(session: str = Depends(get_session)):
    await WebSession.get_user(session)
    await WebSession.end(session)
    return {'msg': 'Logged out!'}


TAG = 'users'

ROUTES = [
    ('GET', '/session', get_session_user, None),
    ('GET', '/users', get_users, None),
    ('GET', '/users/{username}', get_user, None),
    ('POST', '/users', create_user, None),
    ('PATCH', '/users', update_user, ActionOkOut),
    ('DELETE', '/users', delete_user, ActionOkOut),
    ('POST', '/login', log_in, ActionOkOut),
    ('POST', '/logout', log_out, ActionOkOut),
]
