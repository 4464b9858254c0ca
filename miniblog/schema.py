"""
GraphQL schema definition using Strawberry
"""

from typing import Any, Dict, List, Optional

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from . import models
from .logging import get_logger
from .resolvers import CreatePostCommand, MutationResolver, QueryResolver
from .store import BlogStore

logger = get_logger(__name__)


# --- Types ---

@strawberry.type
class User:
    id: strawberry.ID
    name: str
    avatar_url: Optional[str]

    @classmethod
    def from_model(cls, user: models.User) -> "User":
        return cls(id=strawberry.ID(user.id), name=user.name, avatar_url=user.avatar_url)


@strawberry.type
class Post:
    id: strawberry.ID
    title: str
    body: str
    author: User
    tags: List[str]
    published_at: str

    @classmethod
    def from_model(cls, post: models.Post) -> "Post":
        return cls(
            id=strawberry.ID(post.id),
            title=post.title,
            body=post.body,
            author=User.from_model(post.author),
            tags=list(post.tags),
            published_at=post.published_at,
        )


@strawberry.input
class CreatePostInput:
    title: str
    body: str
    author_id: strawberry.ID
    tags: Optional[List[str]] = None


def get_store(info: strawberry.Info) -> BlogStore:
    return info.context["store"]


# --- Query Definition ---

@strawberry.type
class Query:
    @strawberry.field
    def posts(self, info: strawberry.Info) -> List[Post]:
        return [Post.from_model(p) for p in QueryResolver(get_store(info)).posts()]

    @strawberry.field
    def post(self, info: strawberry.Info, id: strawberry.ID) -> Optional[Post]:
        post = QueryResolver(get_store(info)).post(str(id))
        return Post.from_model(post) if post is not None else None

    @strawberry.field
    def user(self, info: strawberry.Info, id: strawberry.ID) -> Optional[User]:
        user = QueryResolver(get_store(info)).user(str(id))
        return User.from_model(user) if user is not None else None


# --- Mutation Definition ---

@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_post(self, info: strawberry.Info, input: CreatePostInput) -> Post:
        command = CreatePostCommand(
            title=input.title,
            body=input.body,
            author_id=str(input.author_id),
            tags=input.tags,
        )
        return Post.from_model(MutationResolver(get_store(info)).create_post(command))


schema = strawberry.Schema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema, raising if it is broken.

    Runs the introspection query against the built schema so that unresolved
    type references surface at startup rather than on the first request.
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        raise RuntimeError(
            f"GraphQL schema validation failed: {'; '.join(str(e) for e in errors)}"
        )

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        raise RuntimeError(
            f"GraphQL introspection failed: {'; '.join(str(e) for e in result.errors)}"
        )

    logger.info("GraphQL schema validation successful")


def create_graphql_router(
    store: BlogStore, path: str = "/api/graphql", graphiql: bool = True
) -> GraphQLRouter:
    """Create a GraphQL router bound to ``store``."""

    async def get_context(request: Request) -> Dict[str, Any]:
        return {"request": request, "store": store}

    return GraphQLRouter(
        schema,
        path=path,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
