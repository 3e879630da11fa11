"""Tests for API endpoints."""
import pytest
from fastapi.testclient import TestClient

from fruitmatch.api.deps import get_rankings
from fruitmatch.core.ranking import MemoryRankingStore
from fruitmatch.main import app


@pytest.fixture
def store():
    """Fresh ranking store for each test."""
    return MemoryRankingStore(max_entries=5)


@pytest.fixture
def client(store):
    """Create test client bound to the fresh store."""
    app.dependency_overrides[get_rankings] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "name" in data
        assert "version" in data
        assert "endpoints" in data


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"


class TestScoreEndpoint:
    """Tests for score submission."""

    def test_submit_score(self, client):
        """A valid submission returns the entry and its rank."""
        response = client.post(
            "/api/score",
            json={"nickname": "kim", "score": 1530, "level": 2, "time": 37},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["rank"] == 1
        assert data["entry"]["nickname"] == "kim"
        assert data["entry"]["score"] == 1530
        assert "createdAt" in data["entry"]

    def test_defaults(self, client):
        """Level and time are optional."""
        response = client.post("/api/score", json={"nickname": "lee", "score": 10})

        entry = response.json()["entry"]
        assert entry["level"] == 1
        assert entry["time"] == 0

    def test_long_nickname_is_cut(self, client):
        """Nicknames are stored with at most 20 characters."""
        response = client.post("/api/score", json={"nickname": "n" * 40, "score": 10})

        assert response.status_code == 200
        assert response.json()["entry"]["nickname"] == "n" * 20

    def test_blank_nickname(self, client):
        """A missing nickname is rejected."""
        response = client.post("/api/score", json={"nickname": "   ", "score": 10})

        assert response.status_code == 400

    def test_score_must_be_a_number(self, client):
        """Non-numeric scores fail validation."""
        response = client.post("/api/score", json={"nickname": "kim", "score": "lots"})

        assert response.status_code == 422

    def test_rank_reflects_order(self, client):
        """Lower scores rank behind higher ones."""
        client.post("/api/score", json={"nickname": "a", "score": 500})
        client.post("/api/score", json={"nickname": "b", "score": 900})

        response = client.post("/api/score", json={"nickname": "c", "score": 700})

        assert response.json()["rank"] == 2

    def test_off_the_board(self, client):
        """A score below a full board has no rank."""
        for score in (600, 500, 400, 300, 200):
            client.post("/api/score", json={"nickname": "p", "score": score})

        response = client.post("/api/score", json={"nickname": "late", "score": 100})

        assert response.status_code == 200
        assert response.json()["rank"] is None


class TestRankingsEndpoint:
    """Tests for ranking listing and reset."""

    def test_empty_rankings(self, client):
        """A new board is empty."""
        response = client.get("/api/rankings")

        assert response.status_code == 200
        assert response.json() == {"success": True, "rankings": []}

    def test_rankings_sorted(self, client):
        """Entries are listed best score first."""
        for name, score in [("a", 100), ("b", 300), ("c", 200)]:
            client.post("/api/score", json={"nickname": name, "score": score})

        rankings = client.get("/api/rankings").json()["rankings"]

        assert [r["nickname"] for r in rankings] == ["b", "c", "a"]

    def test_clear_rankings(self, client):
        """DELETE empties the board."""
        client.post("/api/score", json={"nickname": "a", "score": 100})

        response = client.delete("/api/rankings")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert client.get("/api/rankings").json()["rankings"] == []
