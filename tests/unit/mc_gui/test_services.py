"""Unit tests for the REST boundary services."""

from __future__ import annotations

import io
import json
from unittest.mock import MagicMock, patch
from urllib import error

import pytest

from mc_common.errors import BackendRequestError
from mc_gui.services import ApiClient, RecordQuery, RecordsService, SystemService

pytestmark = pytest.mark.unit_gui


def fake_response(payload: object, status: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status = status
    resp.read.return_value = json.dumps(payload).encode("utf-8")
    resp.__enter__.return_value = resp
    return resp


class TestRecordQuery:
    def test_to_params_drops_empty_values(self) -> None:
        query = RecordQuery(page=2, limit=25, search="", filters={"kyc_status": ""})
        assert query.to_params() == {"page": 2, "limit": 25}

    def test_to_params_includes_search_filters_and_sort(self) -> None:
        query = RecordQuery(
            search="asha",
            filters={"kyc_status": "approved"},
            sort_by="created_at",
            sort_order="asc",
        )
        assert query.to_params() == {
            "page": 1,
            "limit": 25,
            "search": "asha",
            "kyc_status": "approved",
            "sort_by": "created_at",
            "sort_order": "ASC",
        }


class TestApiClient:
    def test_rejects_non_http_base_url(self) -> None:
        with pytest.raises(ValueError):
            ApiClient("ftp://example.com")

    def test_get_sends_query_and_bearer_token(self) -> None:
        client = ApiClient("http://api.local/api/", token="tok")
        with patch("mc_gui.services.api_client.request.urlopen") as urlopen:
            urlopen.return_value = fake_response({"ok": True})
            result = client.get("/members", {"page": 1, "search": "a b", "skip": None})

        req = urlopen.call_args.args[0]
        assert result == {"ok": True}
        assert req.full_url == "http://api.local/api/members?page=1&search=a+b"
        assert req.get_header("Authorization") == "Bearer tok"
        assert req.get_method() == "GET"

    def test_post_sends_json_body(self) -> None:
        client = ApiClient("http://api.local/api")
        with patch("mc_gui.services.api_client.request.urlopen") as urlopen:
            urlopen.return_value = fake_response({"message": "sent"})
            client.post("/system/test/sms", {"phone": "0712"})

        req = urlopen.call_args.args[0]
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"phone": "0712"}
        assert req.get_header("Content-type") == "application/json"

    def test_http_error_uses_backend_message(self) -> None:
        client = ApiClient("http://api.local/api")
        http_error = error.HTTPError(
            "http://api.local/api/members",
            403,
            "Forbidden",
            {},
            io.BytesIO(b'{"error": "Admin access required"}'),
        )
        with patch("mc_gui.services.api_client.request.urlopen", side_effect=http_error):
            with pytest.raises(BackendRequestError) as excinfo:
                client.get("/members")

        assert str(excinfo.value) == "Admin access required"
        assert excinfo.value.context["status"] == 403

    def test_server_errors_are_retried(self) -> None:
        client = ApiClient("http://api.local/api", max_retries=1, backoff_base=0)
        http_error = error.HTTPError(
            "http://api.local/api/system/health", 503, "Unavailable", {}, io.BytesIO(b"")
        )
        with patch(
            "mc_gui.services.api_client.request.urlopen",
            side_effect=[http_error, fake_response({"status": "healthy"})],
        ) as urlopen:
            assert client.get("/system/health") == {"status": "healthy"}
        assert urlopen.call_count == 2

    def test_client_errors_are_not_retried(self) -> None:
        client = ApiClient("http://api.local/api", max_retries=2, backoff_base=0)
        http_error = error.HTTPError(
            "http://api.local/api/members", 404, "Not Found", {}, io.BytesIO(b"")
        )
        with patch(
            "mc_gui.services.api_client.request.urlopen", side_effect=http_error
        ) as urlopen:
            with pytest.raises(BackendRequestError) as excinfo:
                client.get("/members")
        assert urlopen.call_count == 1
        assert excinfo.value.status == 404
        assert excinfo.value.retryable is False

    def test_connection_failures_are_retried(self) -> None:
        client = ApiClient("http://api.local/api", max_retries=1, backoff_base=0)
        with patch(
            "mc_gui.services.api_client.request.urlopen",
            side_effect=[error.URLError("connection reset"), fake_response({"ok": True})],
        ) as urlopen:
            assert client.get("/system/health") == {"ok": True}
        assert urlopen.call_count == 2

    def test_connection_failure_raises_backend_error(self) -> None:
        client = ApiClient("http://api.local/api", max_retries=0)
        with patch(
            "mc_gui.services.api_client.request.urlopen",
            side_effect=error.URLError("connection refused"),
        ):
            with pytest.raises(BackendRequestError) as excinfo:
                client.get("/members")
        assert excinfo.value.context["method"] == "GET"
        assert excinfo.value.context["reason"] == "connection refused"
        assert excinfo.value.retryable is True

    def test_invalid_json_raises_backend_error(self) -> None:
        client = ApiClient("http://api.local/api")
        resp = fake_response(None)
        resp.read.return_value = b"<html>"
        with patch("mc_gui.services.api_client.request.urlopen", return_value=resp):
            with pytest.raises(BackendRequestError):
                client.get("/members")


class TestRecordsService:
    def test_fetch_page_parses_rows_and_pagination(self) -> None:
        client = MagicMock()
        client.get.return_value = {
            "members": [{"id": "1"}, {"id": "2"}],
            "pagination": {"total": 2, "page": 1, "limit": 25, "pages": 1},
        }
        service = RecordsService(client, "/members", "members")

        page = service.fetch_page(RecordQuery(search="x"))

        client.get.assert_called_once_with("/members", {"page": 1, "limit": 25, "search": "x"})
        assert [row["id"] for row in page.rows] == ["1", "2"]
        assert page.pagination.total == 2

    @pytest.mark.parametrize(
        "payload",
        [
            None,
            {"pagination": {"total": 0, "page": 1, "limit": 25, "pages": 0}},
            {"members": []},
            {"members": [], "pagination": {"total": 30, "page": 9, "limit": 10, "pages": 3}},
        ],
    )
    def test_malformed_payload_raises(self, payload: object) -> None:
        client = MagicMock()
        client.get.return_value = payload
        service = RecordsService(client, "/members", "members")

        with pytest.raises(BackendRequestError):
            service.fetch_page(RecordQuery())


class TestSystemService:
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get_health", "/system/health"),
            ("get_metrics", "/system/metrics"),
            ("get_database_stats", "/system/database"),
            ("get_queue_stats", "/system/queues"),
            ("get_application_metrics", "/system/application"),
        ],
    )
    def test_snapshot_endpoints(self, method: str, path: str) -> None:
        client = MagicMock()
        getattr(SystemService(client), method)()
        client.get.assert_called_once_with(path)

    def test_actions(self) -> None:
        client = MagicMock()
        service = SystemService(client)

        service.clear_cache()
        service.test_kcb_connection()
        service.test_sms_service("0712")
        service.test_email_service()

        assert [c.args for c in client.post.call_args_list] == [
            ("/system/cache/clear",),
            ("/system/test/kcb",),
            ("/system/test/sms", {"phone": "0712"}),
            ("/system/test/email", {"email": None}),
        ]
