from fastapi import Depends
from ..auth import get_session
from ..concepts import Friend, User, WebSession
from .. import responses
from ..schemas.users import ActionOkOut


async def get_friends(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return await User.ids_to_usernames(await Friend.get_friends(user))


async def remove_friend(friend: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    friend_id = (await User.get_user_by_username(friend))['_id']
    return await Friend.remove_friend(user, friend_id)


async def get_requests(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return await responses.friend_requests(await Friend.get_requests(user))


async def send_friend_request(to: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    to_id = (await User.get_user_by_username(to))['_id']
    return await Friend.send_request(user, to_id)


async def remove_friend_request(to: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    to_id = (await User.get_user_by_username(to))['_id']
    return await Friend.remove_request(user, to_id)


async def accept_friend_request(from_user: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    from_id = (await User.get_user_by_username(from_user))['_id']
    return await Friend.accept_request(from_id, user)


async def reject_friend_request(from_user: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    from_id = (await User.get_user_by_username(from_user))['_id']
    return await Friend.reject_request(from_id, user)


TAG = 'friends'

ROUTES = [
    ('GET', '/friends', get_friends, None),
    ('DELETE', '/friends/{friend}', remove_friend, ActionOkOut),
    ('GET', '/friend/requests', get_requests, None),
    ('POST', '/friend/requests/{to}', send_friend_request, ActionOkOut),
    ('DELETE', '/friend/requests/{to}', remove_friend_request, ActionOkOut),
    ('PUT', '/friend/accept/{from_user}', accept_friend_request, ActionOkOut),
    ('PUT', '/friend/reject/{from_user}', reject_friend_request, ActionOkOut),
]
