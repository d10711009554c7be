"""
Tests for the stateless /inference endpoint.
"""
import time

import pytest
from fastapi.testclient import TestClient

from brief_engine.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


class TestInferenceEndpoint:
    """Tests for POST /inference"""

    def test_single_asset_request(self, client):
        response = client.post("/inference", json={"message": "make a LinkedIn post to build authority"})

        assert response.status_code == 200
        data = response.json()
        assert data["inference"]["platform"]["value"] == "linkedin"
        assert data["inference"]["intent"]["value"] == "authority"
        assert data["inference"]["task_type"]["value"] == "single_asset"
        assert data["summary"] == "LinkedIn Post for Authority"
        assert data["clarifying_question"] is None

    def test_missing_platform_asks_question(self, client):
        response = client.post("/inference", json={"message": "I need a 30 day content calendar"})

        data = response.json()
        assert data["inference"]["duration"]["value"] == "30 days"
        assert data["inference"]["quantity"]["value"] == 30
        assert data["clarifying_question"]["id"] == "platform"
        assert len(data["clarifying_question"]["options"]) == 8

    def test_history_and_audiences(self, client, brand_audiences):
        response = client.post("/inference", json={
            "message": "make it about wellness",
            "conversation_history": ["I want 3 Instagram carousels"],
            "brand_audiences": brand_audiences + [{"isPrimary": True}],
        })

        assert response.status_code == 200
        inference = response.json()["inference"]
        assert inference["platform"]["value"] == "instagram"
        assert inference["audience_id"]["value"] == "Fitness Enthusiasts"

    def test_empty_message(self, client):
        response = client.post("/inference", json={"message": ""})

        data = response.json()
        assert data["inference"]["task_type"] == {
            "value": "single_asset",
            "confidence": 0.3,
            "source": "pending",
            "inferred_from": "default",
        }
        assert data["summary"] == "New Brief"

    def test_oversized_message_is_bounded(self, client):
        message = "5 a " * 5000

        start = time.perf_counter()
        response = client.post("/inference", json={
            "message": message,
            "conversation_history": [message, message, message],
        })

        assert response.status_code == 200
        assert time.perf_counter() - start < 2.0

    def test_missing_message_rejected(self, client):
        response = client.post("/inference", json={})
        assert response.status_code == 422
