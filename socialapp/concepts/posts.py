from typing import Dict, List, Optional
from bson import ObjectId
from .base import DocCollection
from ..errors import BadValuesError, ForbiddenError, NotFoundError
from ..schemas.posts import PostOptions, PostUpdate

class PostConcept:
    def __init__(self, name: str = 'posts'):
        self.posts = DocCollection(name)

    async def create(self, author: ObjectId, content: str, options: Optional[PostOptions] = None):
        if not content:
            raise BadValuesError("Post content must be non-empty!")
        doc = {'author': author, 'content': content}
        if options is not None:
            doc['options'] = options.model_dump(exclude_none=True)
        _id = await self.posts.create_one(doc)
        return {'msg': 'Post successfully created!', 'post': await self.posts.read_one({'_id': _id})}

    async def get_posts(self, query: Dict) -> List[Dict]:
        return await self.posts.read_many(query)

    async def get_by_author(self, author: ObjectId) -> List[Dict]:
        return await self.get_posts({'author': author})

    async def update(self, _id: ObjectId, update: PostUpdate):
        fields = update.model_dump(exclude_unset=True, exclude_none=True)
        if 'content' in fields and not fields['content']:
            raise BadValuesError("Content must be non-empty!")
        if fields and not await self.posts.update_one({'_id': _id}, fields):
            raise NotFoundError('Post', _id)
        return {'msg': 'Post successfully updated!'}

    async def delete(self, _id: ObjectId):
        await self.posts.delete_one({'_id': _id})
        return {'msg': 'Post deleted successfully!'}

    async def delete_by_author(self, author: ObjectId) -> int:
        return await self.posts.delete_many({'author': author})

    async def is_author(self, user: ObjectId, _id: ObjectId):
        post = await self.posts.read_one({'_id': _id})
        if not post:
            raise NotFoundError('Post', _id)
        if post['author'] != user:
            raise ForbiddenError(user, 'post', _id)
