"""End-to-end tests for vote and leaderboard endpoints."""

from unittest.mock import AsyncMock

import pytest
from dishka import Provider, Scope, provide
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from linkedout.domain.repository import UnitOfWork
from linkedout.interface.api.app import create_app
from linkedout.persistence.repository import SessionUnitOfWork
from tests.di import build_test_container

URN = "urn:li:activity:7200000000000000001"
CONTENT = "Unpopular opinion: hustle is a lifestyle, not a job."


@pytest.fixture
def client():
    """Create test client backed by in-memory persistence."""
    app_instance = create_app(container=build_test_container())
    with TestClient(app_instance) as test_client:
        yield test_client


class FailingCommitProvider(Provider):
    """Unit of work over a session whose commit is rejected by the database."""

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        session = AsyncMock()
        session.commit.side_effect = OperationalError(
            "COMMIT", {}, Exception("server closed the connection")
        )
        return SessionUnitOfWork(session)


@pytest.fixture
def failing_commit_client():
    """Create test client whose vote commits fail."""
    container = build_test_container(overrides=[FailingCommitProvider()])
    with TestClient(create_app(container=container)) as test_client:
        yield test_client


def vote(client, voter_id: str, vote_type: str, urn: str = URN, content: str = CONTENT):
    return client.post(
        "/votes",
        json={"urn": urn, "content": content, "voteType": vote_type, "voterId": voter_id},
    )


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert "git_sha" in body


class TestSubmitVoteEndpoint:
    """End-to-end tests for POST /votes."""

    def test_first_vote_returns_created_tally(self, client):
        # Act
        response = vote(client, "voter-1", "guru")

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["urn"] == "7200000000000000001"
        assert body["content"] == CONTENT
        assert body["totalVotes"] == 1
        assert body["votes"] == {
            "solid": 0,
            "interesting": 0,
            "salesman": 0,
            "bullshit": 0,
            "scam": 0,
            "guru": 1,
            "theater": 0,
        }
        assert "createdAt" in body

    def test_changing_vote_keeps_single_vote(self, client):
        vote(client, "voter-1", "solid")

        body = vote(client, "voter-1", "scam").json()

        assert body["votes"]["solid"] == 0
        assert body["votes"]["scam"] == 1
        assert body["totalVotes"] == 1

    def test_repeat_vote_is_idempotent(self, client):
        first = vote(client, "voter-1", "theater").json()
        second = vote(client, "voter-1", "theater").json()

        assert first == second

    def test_votes_from_many_voters_share_one_post(self, client):
        ids = {vote(client, f"voter-{i}", "salesman").json()["id"] for i in range(5)}

        assert len(ids) == 1
        leaderboard = client.get("/votes/leaderboard").json()
        assert len(leaderboard) == 1
        assert leaderboard[0]["totalVotes"] == 5

    def test_invalid_category_is_bad_request(self, client):
        response = vote(client, "voter-1", "awesome")

        assert response.status_code == 400
        assert "awesome" in response.json()["detail"]
        assert client.get("/votes/leaderboard").json() == []

    def test_malformed_urn_is_bad_request(self, client):
        response = vote(client, "voter-1", "solid", urn="not-a-urn")

        assert response.status_code == 400

    def test_blank_voter_is_bad_request(self, client):
        response = vote(client, "   ", "solid")

        assert response.status_code == 400
        assert client.get("/votes/leaderboard").json() == []

    def test_blank_content_on_new_post_is_bad_request(self, client):
        response = vote(client, "voter-1", "solid", content="  ")

        assert response.status_code == 400

    def test_missing_field_is_unprocessable(self, client):
        response = client.post("/votes", json={"urn": URN, "voteType": "solid"})

        assert response.status_code == 422


class TestLeaderboardEndpoint:
    """End-to-end tests for GET /votes/leaderboard."""

    def test_ranked_by_total_votes(self, client):
        for i in range(3):
            vote(client, f"a{i}", "solid", urn="1")
        for i in range(10):
            vote(client, f"b{i}", "bullshit", urn="2")
        for i in range(5):
            vote(client, f"c{i}", "guru", urn="3")

        body = client.get("/votes/leaderboard").json()

        assert [entry["totalVotes"] for entry in body] == [10, 5, 3]

    def test_filter_by_type(self, client):
        for i in range(5):
            vote(client, f"a{i}", "bullshit", urn="1")
        for i in range(3):
            vote(client, f"b{i}", "solid", urn="2")

        body = client.get("/votes/leaderboard", params={"type": "bullshit"}).json()

        assert [entry["urn"] for entry in body] == ["1"]

    def test_pagination(self, client):
        for n in range(10):
            for i in range(n + 1):
                vote(client, f"voter-{n}-{i}", "scam", urn=str(1000 + n))

        body = client.get("/votes/leaderboard", params={"offset": 5, "limit": 3}).json()

        assert [entry["totalVotes"] for entry in body] == [5, 4, 3]

    def test_invalid_type_is_bad_request(self, client):
        response = client.get("/votes/leaderboard", params={"type": "cringe"})

        assert response.status_code == 400

    @pytest.mark.parametrize(
        "params",
        [{"limit": 0}, {"limit": 101}, {"offset": -1}, {"limit": "many"}],
    )
    def test_out_of_range_paging_is_unprocessable(self, client, params):
        response = client.get("/votes/leaderboard", params=params)

        assert response.status_code == 422


class TestStorageFailures:
    """Storage failures reach the client as 503."""

    def test_failed_commit_is_service_unavailable(self, failing_commit_client):
        response = vote(failing_commit_client, "voter-1", "solid")

        assert response.status_code == 503
        assert response.json() == {"detail": "Storage unavailable"}
