from fastapi import Depends
from ..auth import get_session
from ..concepts import Message, User, WebSession
from ..concepts.base import parse_id
from .. import responses
from ..schemas.messages import MessageIn, MessageUpdate
from ..schemas.users import ActionOkOut


async def get_user_messages(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return await responses.messages(await Message.get_by_user(user))


async def send_message(payload: MessageIn, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    usernames = payload.recipient_usernames
    if isinstance(usernames, str):
        usernames = [usernames]
    recipients = [(await User.get_user_by_username(username))['_id'] for username in usernames]
    sent = await Message.send_message(user, recipients, payload.content)
    return {'msg': sent['msg'], 'message': await responses.message(sent['message'])}


async def edit_message(_id: str, payload: MessageUpdate, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    message_id = parse_id(_id)
    await Message.is_sender(user, message_id)
    return await Message.update(message_id, payload)


async def delete_message(_id: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    message_id = parse_id(_id)
    await Message.is_sender(user, message_id)
    return await Message.delete(message_id)


TAG = 'messages'

ROUTES = [
    ('GET', '/messages', get_user_messages, None),
    ('POST', '/messages', send_message, None),
    ('PATCH', '/messages/{_id}', edit_message, ActionOkOut),
    ('DELETE', '/messages/{_id}', delete_message, ActionOkOut),
]
