from fastapi import Depends
from ..auth import get_session
from ..concepts import Status, WebSession
from ..concepts.base import parse_id
from ..responses import to_json
from ..schemas.statuses import StatusIn, StatusUpdate
from ..schemas.users import ActionOkOut


async def get_user_status(session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return to_json(await Status.get_user_status(user))


async def create_status(payload: StatusIn, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    return to_json(await Status.create(user, payload.content))


async def update_status(_id: str, payload: StatusUpdate, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    status_id = parse_id(_id)
    await Status.is_user(user, status_id)
    return await Status.update(status_id, payload)


async def remove_status(_id: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    status_id = parse_id(_id)
    await Status.is_user(user, status_id)
    return await Status.delete(status_id)


TAG = 'status'

ROUTES = [
    ('GET', '/status', get_user_status, None),
    ('POST', '/status', create_status, None),
    ('PATCH', '/status/{_id}', update_status, ActionOkOut),
    ('DELETE', '/status/{_id}', remove_status, ActionOkOut),
]
