from unittest.mock import MagicMock

import pytest
import requests

from truss_dashboard.client import ParagonClient
from truss_dashboard.errors import VendorApiError
from truss_dashboard.models import LumberPriceRequest


def _response(status: int = 200, json_data=None, content: bytes = b"x") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    resp.content = content
    resp.json.return_value = json_data
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error", response=resp)
    return resp


def _client(api_key: str = "") -> tuple[ParagonClient, MagicMock]:
    session = MagicMock()
    session.headers = {}
    return ParagonClient(base_url="https://vendor.test/", api_key=api_key, session=session), session


class TestParagonClientInit:
    def test_auth_header_when_key_set(self):
        client, session = _client(api_key="secret")
        assert session.headers["Authorization"] == "JWT secret"

    def test_no_auth_header_without_key(self):
        client, session = _client()
        assert "Authorization" not in session.headers

    def test_base_url_trailing_slash_stripped(self):
        client, _ = _client()
        assert client.base_url == "https://vendor.test"


class TestGet:
    def test_returns_json(self):
        client, session = _client()
        session.get.return_value = _response(json_data=[{"id": "p1"}])
        assert client.get("/api/public/projects") == [{"id": "p1"}]
        assert session.get.call_args[0][0] == "https://vendor.test/api/public/projects"

    def test_empty_query_values_dropped(self):
        client, session = _client()
        session.get.return_value = _response(json_data={})
        client.get("/api/Lumber", query={"species": "SPF", "grade": ""})
        assert session.get.call_args[1]["params"] == {"species": "SPF"}

    def test_no_query(self):
        client, session = _client()
        session.get.return_value = _response(json_data={})
        client.get("/api/Lumber", query={"grade": ""})
        assert session.get.call_args[1]["params"] is None

    def test_empty_body_returns_none(self):
        client, session = _client()
        session.get.return_value = _response(content=b"")
        assert client.get("/api/health") is None

    def test_http_error_raises(self):
        client, session = _client()
        session.get.return_value = _response(status=404)
        with pytest.raises(VendorApiError) as exc_info:
            client.get("/api/missing")
        assert exc_info.value.status_code == 404

    def test_transport_error_raises(self):
        client, session = _client()
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(VendorApiError):
            client.get("/api/public/projects")


class TestHealthCheck:
    def test_reachable(self):
        client, session = _client()
        session.get.return_value = _response()
        assert client.health_check() is True

    def test_error_status(self):
        client, session = _client()
        session.get.return_value = _response(status=500)
        assert client.health_check() is False

    def test_connection_error(self):
        client, session = _client()
        session.get.side_effect = requests.ConnectionError("refused")
        assert client.health_check() is False


class TestFetchHelpers:
    def test_get_projects(self):
        client, session = _client()
        session.get.return_value = _response(json_data=[{"id": "p1", "name": "Barn"}])
        projects = client.get_projects()
        assert [p.name for p in projects] == ["Barn"]

    def test_get_projects_failure_returns_empty(self):
        client, session = _client()
        session.get.return_value = _response(status=500)
        assert client.get_projects() == []

    def test_get_component_design(self):
        client, session = _client()
        session.get.return_value = _response(
            json_data={"componentDesign": {"component": {"name": "T01", "members": []}}}
        )
        design = client.get_component_design("g1")
        assert design.component.name == "T01"
        assert session.get.call_args[0][0].endswith("/api/ComponentDesigns/g1")

    def test_get_component_design_failure(self):
        client, session = _client()
        session.get.side_effect = requests.Timeout("slow")
        assert client.get_component_design("g1") is None

    def test_get_plate_type_properties(self):
        client, session = _client()
        session.get.return_value = _response(json_data={"thickness": 0.036})
        assert client.get_plate_type_properties("20ga") == {"thickness": 0.036}

    def test_get_lumber_prices(self):
        client, session = _client()
        session.post.return_value = _response(json_data=[{"length": 144, "cost": 7.25}])
        prices = client.get_lumber_prices(LumberPriceRequest(species="SPF"))
        assert prices[0].length == 144
        assert session.post.call_args[1]["json"]["species"] == "SPF"

    def test_get_lumber_prices_error_status(self):
        client, session = _client()
        session.post.return_value = _response(status=400)
        assert client.get_lumber_prices(LumberPriceRequest()) == []
