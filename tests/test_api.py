"""
HTTP API tests using Flask's test client.

Mirrors the end-to-end scenarios of the service: submissions, lookups,
overrides and the status code mapping for bad input and storage failures.
"""

import base64
import sqlite3
from unittest.mock import MagicMock

import pytest

from bytediff.application.case_coordinator import CaseCoordinator
from bytediff.application.case_store import CaseStore
from bytediff.interface.api import create_app
from helpers import SIXTEEN_BYTES, invert


def _encode(data: bytes) -> str:
    return base64.b64encode(data).decode()


@pytest.fixture
def client(coordinator):
    app = create_app(coordinator)
    app.testing = True
    return app.test_client()


def _post(client, name, side, data):
    return client.post(f"/v1/diff/{name}/{side}", json={"data": _encode(data)})


class TestSubmission:
    """POST /v1/diff/<name>/<side>"""

    def test_accepts_left_and_right(self, client):
        assert _post(client, "case", "left", SIXTEEN_BYTES).status_code == 204
        assert _post(client, "case", "right", SIXTEEN_BYTES).status_code == 204

    def test_no_content_body(self, client):
        response = _post(client, "case", "left", b"abc")
        assert response.data == b""

    def test_invalid_side_is_not_found(self, client):
        response = client.post("/v1/diff/case/up", json={"data": _encode(b"abc")})
        assert response.status_code == 404

    def test_invalid_base64(self, client):
        response = client.post("/v1/diff/case/left", json={"data": ":-%-&-#"})
        assert response.status_code == 400
        assert response.get_json() == {"error": "invalid base64 data"}

    def test_missing_data(self, client):
        response = client.post("/v1/diff/case/left", json={})
        assert response.status_code == 400
        assert response.get_json() == {"error": "missing data"}

    def test_null_data(self, client):
        response = client.post("/v1/diff/case/left", json={"data": None})
        assert response.status_code == 400
        assert response.get_json() == {"error": "missing data"}

    def test_non_string_data(self, client):
        response = client.post("/v1/diff/case/left", json={"data": 42})
        assert response.status_code == 400

    def test_body_must_be_json_object(self, client):
        response = client.post(
            "/v1/diff/case/left", data="not json", content_type="application/json"
        )
        assert response.status_code == 400
        response = client.post("/v1/diff/case/left", json=["a", "b"])
        assert response.status_code == 400

    def test_bad_input_creates_no_case(self, client):
        client.post("/v1/diff/case/left", json={"data": ":-%-&-#"})
        assert client.get("/v1/diff/case").status_code == 404

    def test_payload_too_large(self, coordinator):
        app = create_app(coordinator, max_request_bytes=1024)
        app.testing = True
        limited = app.test_client()

        response = _post(limited, "big", "left", bytes(4000))
        assert response.status_code == 413
        assert response.get_json() == {"error": "payload too large"}
        assert limited.get("/v1/diff/big").status_code == 404

    def test_payload_within_limit(self, coordinator):
        app = create_app(coordinator, max_request_bytes=1024)
        app.testing = True
        limited = app.test_client()

        assert _post(limited, "small", "left", SIXTEEN_BYTES).status_code == 204


class TestReport:
    """GET /v1/diff/<name>"""

    def test_unknown_case(self, client):
        response = client.get("/v1/diff/unknown")
        assert response.status_code == 404
        assert response.get_json() == {"error": "diff case not found"}

    def test_equal(self, client):
        _post(client, "case", "left", SIXTEEN_BYTES)
        _post(client, "case", "right", SIXTEEN_BYTES)
        response = client.get("/v1/diff/case")
        assert response.status_code == 200
        assert response.get_json() == {"status": "equal"}

    def test_just_left_side(self, client):
        _post(client, "case", "left", SIXTEEN_BYTES)
        assert client.get("/v1/diff/case").get_json() == {"status": "length_mismatch"}

    def test_just_right_side(self, client):
        _post(client, "case", "right", SIXTEEN_BYTES)
        assert client.get("/v1/diff/case").get_json() == {"status": "length_mismatch"}

    def test_not_equal(self, client):
        _post(client, "case", "left", SIXTEEN_BYTES)
        _post(client, "case", "right", invert(SIXTEEN_BYTES, [6, 7, 8]))
        body = client.get("/v1/diff/case").get_json()
        assert body == {
            "status": "not_equal",
            "insights": [{"offset": 6, "length": 3}],
        }

    def test_override(self, client):
        _post(client, "case", "left", SIXTEEN_BYTES)
        _post(client, "case", "right", invert(SIXTEEN_BYTES, [7]))
        assert client.get("/v1/diff/case").get_json()["status"] == "not_equal"

        _post(client, "case", "right", SIXTEEN_BYTES)
        assert client.get("/v1/diff/case").get_json() == {"status": "equal"}


class TestStorageFailure:
    """Storage errors map to 500 without being retried."""

    @pytest.fixture
    def failing_store(self):
        store = MagicMock(spec=CaseStore)
        store.get.return_value = None
        store.save.side_effect = sqlite3.OperationalError("database is locked")
        store.get_report.side_effect = sqlite3.OperationalError("database is locked")
        return store

    @pytest.fixture
    def failing_client(self, failing_store):
        app = create_app(CaseCoordinator(failing_store))
        return app.test_client()

    def test_submission(self, failing_client, failing_store):
        response = _post(failing_client, "case", "left", b"abc")
        assert response.status_code == 500
        assert response.get_json() == {"error": "internal storage error"}
        failing_store.save.assert_called_once()

    def test_report(self, failing_client, failing_store):
        response = failing_client.get("/v1/diff/case")
        assert response.status_code == 500
        failing_store.get_report.assert_called_once_with("case")
