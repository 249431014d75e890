"""BlogPost repository protocol."""

from typing import Optional, Protocol

from domain.entities.blog_post import BlogPost


class IBlogPostRepository(Protocol):
    """Repository interface for BlogPost entities."""

    async def get(self, id: str) -> BlogPost | None:
        """Get a blog post by ID."""
        ...

    async def get_all(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        published_only: bool = False,
    ) -> list[BlogPost]:
        """Get all blog posts newest first, optionally filtered."""
        ...

    async def create(self, post: BlogPost) -> BlogPost:
        """Create a new blog post."""
        ...

    async def update(self, post: BlogPost) -> BlogPost:
        """Persist every field of an existing blog post."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a blog post and return whether a row was removed."""
        ...
