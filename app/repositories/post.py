"""Post repository — adds the relation and tag filters the list endpoints need."""


from app.core.ids import canonical_id
from app.domain.post import Post, PostTag
from app.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    model = Post
    filter_map = {
        "author": lambda value: Post.author_id == canonical_id(value),
        "tag": lambda value: Post.post_tags.any(PostTag.tag == value),
    }

    def for_author(self, author_id: str):
        """Base query restricted to one author's posts."""
        return self._base_query().where(Post.author_id == author_id)

    async def get_by_slug(self, slug: str) -> Post | None:
        return await self.find_one(slug=slug)
