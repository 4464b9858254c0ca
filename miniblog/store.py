"""
In-memory post and user store.

Both collections live for the lifetime of the process and are shared by every
request handler. Each collection has its own lock; anything that needs both
must take them in the order posts, then users (see ``BlogStore.locked``).
"""

import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, List, Optional

from .logging import get_logger
from .models import Post, User

logger = get_logger(__name__)


class StoreError(Exception):
    """Raised when a store invariant would be violated."""


class DuplicateIdError(StoreError):
    def __init__(self, kind: str, id: str):
        super().__init__(f"{kind} with id {id!r} already exists")
        self.kind = kind
        self.id = id


class StoreSession:
    """Access to both collections while ``BlogStore.locked`` holds their locks.

    The session is closed when the ``with`` block exits; any later use raises
    ``StoreError`` instead of touching the unlocked maps.
    """

    def __init__(self, posts: Dict[str, Post], users: Dict[str, User]):
        self._posts = posts
        self._users = users
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise StoreError("store session used after its locks were released")

    def get_user(self, id: str) -> Optional[User]:
        self._check_open()
        user = self._users.get(id)
        return user.model_copy(deep=True) if user is not None else None

    def insert_post(self, post: Post) -> None:
        self._check_open()
        _insert(self._posts, "Post", post)

    def close(self) -> None:
        self.closed = True


def _insert(table, kind, record):
    if record.id in table:
        raise DuplicateIdError(kind, record.id)
    table[record.id] = record.model_copy(deep=True)


class BlogStore:
    def __init__(self) -> None:
        self._posts: Dict[str, Post] = {}
        self._users: Dict[str, User] = {}
        self._posts_lock = threading.Lock()
        self._users_lock = threading.Lock()

    # --- Posts ---

    def all_posts(self) -> List[Post]:
        with self._posts_lock:
            return [p.model_copy(deep=True) for p in self._posts.values()]

    def get_post(self, id: str) -> Optional[Post]:
        with self._posts_lock:
            post = self._posts.get(id)
            return post.model_copy(deep=True) if post is not None else None

    def insert_post(self, post: Post) -> None:
        with self._posts_lock:
            _insert(self._posts, "Post", post)

    def post_count(self) -> int:
        with self._posts_lock:
            return len(self._posts)

    # --- Users ---

    def get_user(self, id: str) -> Optional[User]:
        with self._users_lock:
            user = self._users.get(id)
            return user.model_copy(deep=True) if user is not None else None

    def insert_user(self, user: User) -> None:
        with self._users_lock:
            _insert(self._users, "User", user)

    def get_or_insert_user(self, id: str, fallback: Callable[[], User]) -> User:
        """Return the user stored under ``id``, creating it from ``fallback`` if missing.

        The lookup and the insert happen under a single acquisition of the
        users lock, so two concurrent callers never both create the user.
        """
        with self._users_lock:
            user = self._users.get(id)
            if user is None:
                user = fallback()
                if user.id != id:
                    raise StoreError(f"fallback produced user {user.id!r} for id {id!r}")
                self._users[id] = user.model_copy(deep=True)
                logger.debug("User inserted", user_id=id)
            return user.model_copy(deep=True)

    def user_count(self) -> int:
        with self._users_lock:
            return len(self._users)

    # --- Both collections ---

    @contextmanager
    def locked(self) -> Iterator[StoreSession]:
        """Hold the posts lock and then the users lock for the duration of the block.

        The locks are not reentrant: code inside the block must go through the
        yielded session, never back through this store's own methods.
        """
        with self._posts_lock:
            with self._users_lock:
                session = StoreSession(self._posts, self._users)
                try:
                    yield session
                finally:
                    session.close()

    def clear(self) -> None:
        with self.locked():
            self._posts.clear()
            self._users.clear()
