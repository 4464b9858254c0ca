"""
Query and mutation resolvers over the in-memory store
"""

import uuid
from datetime import datetime, timezone
from types import MappingProxyType
from typing import List, Optional

from pydantic import BaseModel

from .logging import get_logger
from .models import Post, User
from .store import BlogStore

logger = get_logger(__name__)

# Display names for the sample author ids, used when a post names an author
# that has no record in the user store.
FALLBACK_AUTHOR_NAMES = MappingProxyType(
    {
        "user-1": "髙橋慶祐",
        "user-2": "佐藤太郎",
        "user-3": "鈴木花子",
        "user-4": "松本次郎",
        "user-5": "後藤優子",
    }
)


def fallback_author_name(author_id: str) -> str:
    return FALLBACK_AUTHOR_NAMES.get(author_id, author_id)


def synthesize_author(author_id: str) -> User:
    return User(id=author_id, name=fallback_author_name(author_id), avatar_url=None)


def now_rfc3339() -> str:
    return datetime.now(timezone.utc).isoformat()


class CreatePostCommand(BaseModel):
    title: str
    body: str
    author_id: str
    tags: Optional[List[str]] = None


class QueryResolver:
    def __init__(self, store: BlogStore):
        self.store = store

    def posts(self) -> List[Post]:
        return self.store.all_posts()

    def post(self, id: str) -> Optional[Post]:
        return self.store.get_post(id)

    def user(self, id: str) -> Optional[User]:
        return self.store.get_user(id)


class MutationResolver:
    def __init__(self, store: BlogStore):
        self.store = store

    def create_post(self, command: CreatePostCommand) -> Post:
        """Create a post and return it with its author embedded.

        An author id with no stored user gets a synthesized author for the
        post's snapshot. The synthesized user is not written to the user
        store, so ``user(author_id)`` keeps returning None for it.
        """
        with self.store.locked() as session:
            author = session.get_user(command.author_id)
            synthesized = author is None
            if author is None:
                author = synthesize_author(command.author_id)

            post = Post(
                id=str(uuid.uuid4()),
                title=command.title,
                body=command.body,
                author=author,
                tags=list(command.tags) if command.tags is not None else [],
                published_at=now_rfc3339(),
            )
            session.insert_post(post)

        logger.info(
            "Post created",
            post_id=post.id,
            author_id=command.author_id,
            synthesized_author=synthesized,
        )
        return post
