from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Data Model ---
class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    avatar_url: Optional[str] = None


class Post(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    body: str
    author: User  # snapshot taken when the post was created
    tags: List[str] = Field(default_factory=list)
    published_at: str  # RFC 3339
