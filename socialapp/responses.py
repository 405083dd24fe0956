"""
Shapes concept documents into API payloads: user ids become usernames and
every ObjectId is rendered as a string.
"""
from typing import Any, Dict, List, Optional
from bson import ObjectId
from .concepts import User

def to_json(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_json(v) for v in value]
    return value

async def post(doc: Optional[Dict]) -> Optional[Dict]:
    if not doc:
        return doc
    author = await User.get_user_by_id(doc['author'])
    return to_json({**doc, 'author': author['username']})

async def posts(docs: List[Dict]) -> List[Dict]:
    authors = await User.ids_to_usernames([d['author'] for d in docs])
    return [to_json({**d, 'author': a}) for d, a in zip(docs, authors)]

async def friend_requests(docs: List[Dict]) -> List[Dict]:
    froms = await User.ids_to_usernames([d['from'] for d in docs])
    tos = await User.ids_to_usernames([d['to'] for d in docs])
    return [to_json({**d, 'from': f, 'to': t}) for d, f, t in zip(docs, froms, tos)]

async def message(doc: Optional[Dict]) -> Optional[Dict]:
    if not doc:
        return doc
    return (await messages([doc]))[0]

async def messages(docs: List[Dict]) -> List[Dict]:
    senders = await User.ids_to_usernames([d['sender'] for d in docs])
    shaped = []
    for d, sender in zip(docs, senders):
        recipients = await User.ids_to_usernames(d['recipients'])
        shaped.append(to_json({**d, 'sender': sender, 'recipients': recipients}))
    return shaped
