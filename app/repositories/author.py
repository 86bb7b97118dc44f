"""Author repository."""


from app.domain.author import Author
from app.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    model = Author

    async def get_by_email(self, email: str) -> Author | None:
        return await self.find_one(email=email)
