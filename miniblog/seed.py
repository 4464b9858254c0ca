"""
Sample users and posts loaded into a fresh store
"""

import uuid

from .logging import get_logger
from .models import Post, User
from .resolvers import FALLBACK_AUTHOR_NAMES, now_rfc3339
from .store import BlogStore

logger = get_logger(__name__)

# --- Data Source (In-Memory) ---
SAMPLE_POSTS = [
    {
        "title": "最初のブログ投稿",
        "body": "これは最初のブログ投稿の内容です。\n\n"
        "GraphQLとReact Queryを使用したミニブログ管理ダッシュボードのサンプルです。",
        "author_id": "user-1",
        "tags": ["GraphQL", "React"],
    },
    {
        "title": "2番目のブログ投稿",
        "body": "これは2番目のブログ投稿の内容です。\n\n"
        "zodとreact-hook-formを使用したバリデーション機能も実装されています。",
        "author_id": "user-2",
        "tags": ["TypeScript", "React"],
    },
]


def seed_store(store: BlogStore) -> None:
    """Load the sample users, and the sample posts if the store has none yet."""
    for user_id, name in FALLBACK_AUTHOR_NAMES.items():
        store.get_or_insert_user(user_id, lambda: User(id=user_id, name=name))

    if store.post_count():
        logger.info("Store already has posts, skipping sample posts")
        return

    published_at = now_rfc3339()
    for p in SAMPLE_POSTS:
        store.insert_post(
            Post(
                id=str(uuid.uuid4()),
                title=p["title"],
                body=p["body"],
                author=store.get_user(p["author_id"]),
                tags=p["tags"],
                published_at=published_at,
            )
        )

    logger.info("Sample data loaded", users=store.user_count(), posts=store.post_count())
