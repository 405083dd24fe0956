from typing import Optional
from fastapi import Depends
from ..auth import get_session
from ..concepts import Post, User, WebSession
from ..concepts.base import parse_id
from .. import responses
from ..schemas.posts import PostIn, PostUpdate
from ..schemas.users import ActionOkOut


async def get_posts(author: Optional[str] = None):
    if author:
        author_id = (await User.get_user_by_username(author))['_id']
        posts = await Post.get_by_author(author_id)
    else:
        posts = await Post.get_posts({})
    return await responses.posts(posts)


async def create_post(payload: PostIn, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    created = await Post.create(user, payload.content, payload.options)
    return {'msg': created['msg'], 'post': await responses.post(created['post'])}


async def update_post(_id: str, payload: PostUpdate, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    post_id = parse_id(_id)
    await Post.is_author(user, post_id)
    return await Post.update(post_id, payload)


async def delete_post(_id: str, session: str = Depends(get_session)):
    user = await WebSession.get_user(session)
    post_id = parse_id(_id)
    await Post.is_author(user, post_id)
    return await Post.delete(post_id)


TAG = 'posts'

ROUTES = [
    ('GET', '/posts', get_posts, None),
    ('POST', '/posts', create_post, None),
    ('PATCH', '/posts/{_id}', update_post, ActionOkOut),
    ('DELETE', '/posts/{_id}', delete_post, ActionOkOut),
]
