"""Integration tests for the stories and health endpoints."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from beststories.domain.stories import StoryNotFoundError, StorySourceError
from beststories.presentation.api.app import create_app
from beststories_config import Settings
from tests.shared.fixtures import FakeStorySource, make_raw_stories, make_raw_story

pytestmark = pytest.mark.integration

BEST_URL = "/api/v1/stories/best"


@pytest.fixture
def story_source() -> FakeStorySource:
    stories = make_raw_stories({1: 100, 2: 300, 3: 200})
    stories[4] = make_raw_story(4, 50, url=None, title="Ask HN: Favourite tools?")
    return FakeStorySource(stories)


@pytest.fixture
def test_client(
    settings: Settings,
    story_source: FakeStorySource,
) -> Generator[TestClient, None, None]:
    app = create_app(settings=settings, story_source=story_source)
    with TestClient(app) as client:
        yield client


class TestBestStoriesEndpoint:
    """Tests for GET /api/v1/stories/best."""

    def test_returns_top_n_by_score(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL, params={"n": 2})

        assert response.status_code == 200
        data = response.json()
        assert [story["score"] for story in data] == [300, 200]

    def test_response_shape(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL, params={"n": 1})

        story = response.json()[0]
        assert story["title"] == "Story 2"
        assert story["uri"] == "https://example.com/2"
        assert story["posted_by"] == "user2"
        assert story["comment_count"] == 4
        assert story["created_on"] == "test-node"
        assert story["time"].startswith("2023-11-14T22:13:22")
        assert "created_at" in story

    def test_missing_url_serialized_as_null(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL, params={"n": 10})

        last = response.json()[-1]
        assert last["title"] == "Ask HN: Favourite tools?"
        assert last["uri"] is None

    def test_default_count(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL)

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_default_count_from_settings(
        self,
        settings: Settings,
        story_source: FakeStorySource,
    ) -> None:
        app = create_app(
            settings=settings.model_copy(update={"default_count": 2}),
            story_source=story_source,
        )

        with TestClient(app) as client:
            response = client.get(BEST_URL)

        assert response.status_code == 200
        assert [story["score"] for story in response.json()] == [300, 200]

    def test_zero_returns_empty_list(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL, params={"n": 0})

        assert response.status_code == 200
        assert response.json() == []

    def test_negative_count_rejected(
        self,
        test_client: TestClient,
        story_source: FakeStorySource,
    ) -> None:
        response = test_client.get(BEST_URL, params={"n": -1})

        assert response.status_code == 422
        assert story_source.list_calls == 0

    def test_non_integer_count_rejected(self, test_client: TestClient) -> None:
        response = test_client.get(BEST_URL, params={"n": "lots"})

        assert response.status_code == 422

    def test_repeated_requests_hit_cache(
        self,
        test_client: TestClient,
        story_source: FakeStorySource,
    ) -> None:
        test_client.get(BEST_URL, params={"n": 1})
        test_client.get(BEST_URL, params={"n": 3})

        assert story_source.list_calls == 1
        assert story_source.total_detail_calls == 4


class TestBestStoriesErrors:
    """Tests for mapping story source failures to HTTP errors."""

    def test_upstream_unavailable(
        self,
        test_client: TestClient,
        story_source: FakeStorySource,
    ) -> None:
        story_source.list_error = StorySourceError(
            "Hacker News request failed after 4 attempts",
            url="v0/beststories.json",
        )

        response = test_client.get(BEST_URL, params={"n": 2})

        assert response.status_code == 503
        assert response.json()["code"] == "UPSTREAM_UNAVAILABLE"

    def test_story_not_found(
        self,
        test_client: TestClient,
        story_source: FakeStorySource,
    ) -> None:
        story_source.errors = {3: StoryNotFoundError(3)}

        response = test_client.get(BEST_URL, params={"n": 2})

        assert response.status_code == 502
        assert response.json() == {
            "detail": "Story 3 not found",
            "code": "STORY_NOT_FOUND",
        }

    def test_failure_is_not_cached(
        self,
        test_client: TestClient,
        story_source: FakeStorySource,
    ) -> None:
        story_source.errors = {3: StorySourceError("boom")}
        assert test_client.get(BEST_URL).status_code == 503

        story_source.errors = {}
        response = test_client.get(BEST_URL)

        assert response.status_code == 200
        assert story_source.list_calls == 2


class TestHealthEndpoint:
    """Tests for /health endpoint."""

    def test_cold_cache(self, test_client: TestClient) -> None:
        response = test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["cache_warm"] is False

    def test_warm_cache(self, test_client: TestClient) -> None:
        test_client.get(BEST_URL, params={"n": 1})

        response = test_client.get("/health")

        assert response.json()["cache_warm"] is True


class TestLifespan:
    """Tests for resource setup and teardown."""

    def test_story_source_closed_on_shutdown(
        self,
        settings: Settings,
        story_source: FakeStorySource,
    ) -> None:
        app = create_app(settings=settings, story_source=story_source)

        with TestClient(app):
            assert story_source.closed is False

        assert story_source.closed is True
