"""
Tests for the FastAPI application and GraphQL endpoint
"""

import pytest
from fastapi.testclient import TestClient

from miniblog.app import create_app
from miniblog.config import Settings
from miniblog.seed import SAMPLE_POSTS
from miniblog.store import BlogStore

CREATE_POST = """
mutation CreatePost($input: CreatePostInput!) {
  createPost(input: $input) { id title tags author { id name avatarUrl } }
}
"""


@pytest.fixture
def seeded_client():
    app = create_app(Settings(seed_sample_data=True), store=BlogStore())
    with TestClient(app) as client:
        yield client


@pytest.fixture
def empty_client():
    app = create_app(Settings(seed_sample_data=False), store=BlogStore())
    with TestClient(app) as client:
        yield client


def graphql(client, query, variables=None):
    response = client.post("/api/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


def test_health_reports_seeded_counts(seeded_client):
    response = seeded_client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["users"] == 5
    assert body["posts"] == len(SAMPLE_POSTS)


def test_seeded_posts_embed_seeded_authors(seeded_client):
    body = graphql(seeded_client, "{ posts { title author { id name } } }")

    authors = {p["title"]: p["author"] for p in body["data"]["posts"]}
    assert authors["最初のブログ投稿"] == {"id": "user-1", "name": "髙橋慶祐"}
    assert authors["2番目のブログ投稿"] == {"id": "user-2", "name": "佐藤太郎"}


def test_create_post_over_http(seeded_client):
    variables = {"input": {"title": "Hello", "body": "World", "authorId": "user-3"}}
    body = graphql(seeded_client, CREATE_POST, variables)

    post = body["data"]["createPost"]
    assert post["tags"] == []
    assert post["author"] == {"id": "user-3", "name": "鈴木花子", "avatarUrl": None}

    fetched = graphql(seeded_client, "query ($id: ID!) { post(id: $id) { id } }", {"id": post["id"]})
    assert fetched["data"]["post"] == {"id": post["id"]}


def test_unknown_author_is_not_persisted(empty_client):
    variables = {"input": {"title": "T", "body": "B", "authorId": "user-9"}}
    graphql(empty_client, CREATE_POST, variables)

    body = graphql(empty_client, '{ user(id: "user-9") { id } }')
    assert body["data"] == {"user": None}


def test_query_over_get(seeded_client):
    response = seeded_client.get("/api/graphql", params={"query": '{ user(id: "user-5") { name } }'})

    assert response.status_code == 200
    assert response.json()["data"]["user"]["name"] == "後藤優子"


def test_empty_store_without_seeding(empty_client):
    body = graphql(empty_client, "{ posts { id } }")

    assert body["data"] == {"posts": []}


def test_invalid_input_is_a_graphql_error(empty_client):
    response = empty_client.post(
        "/api/graphql",
        json={"query": CREATE_POST, "variables": {"input": {"title": "T"}}},
    )

    assert response.json()["errors"]
    assert empty_client.get("/health").json()["posts"] == 0


def test_responses_carry_request_id(empty_client):
    response = empty_client.get("/health", headers={"X-Request-ID": "abc123"})

    assert response.headers["X-Request-ID"] == "abc123"


def test_cors_allows_any_origin(empty_client):
    response = empty_client.options(
        "/api/graphql",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_custom_graphql_path():
    app = create_app(Settings(seed_sample_data=False, graphql_path="/graphql"), store=BlogStore())
    with TestClient(app) as client:
        response = client.post("/graphql", json={"query": "{ posts { id } }"})

    assert response.json() == {"data": {"posts": []}}


def test_request_id_is_generated_when_absent(empty_client):
    first = empty_client.get("/health").headers["X-Request-ID"]
    second = empty_client.get("/health").headers["X-Request-ID"]

    assert first
    assert first != second
