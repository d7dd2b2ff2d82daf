"""
Tests for the cross-cutting HTTP behavior.

Security headers, request body limit, rate limiting, health,
unknown routes and static files.
"""

import logging
from pathlib import Path

from fastapi.testclient import TestClient

from natours.main import create_app
from natours.shared.security.headers import SECURE_HEADERS
from tests.support import SAMPLE_TOURS, make_settings, read_tours

TOURS = "/api/v1/tours"


class TestSecurityHeaders:
    def test_present_on_success(self, client: TestClient) -> None:
        response = client.get(TOURS)

        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_present_on_not_found(self, client: TestClient) -> None:
        response = client.get(f"{TOURS}/999")

        assert response.headers["X-Frame-Options"] == "DENY"


class TestBodySizeLimit:
    def test_oversized_body_is_413(self, tours_file: Path) -> None:
        app = create_app(make_settings(tours_file, max_request_size_bytes=100))
        with TestClient(app) as client:
            response = client.post(TOURS, json={"summary": "x" * 500})
            count = client.get(TOURS).json()["results"]

        assert response.status_code == 413
        assert response.json() == {"status": "fail", "message": "Request body too large"}
        assert count == 2

    def test_body_within_limit_passes(self, tours_file: Path) -> None:
        app = create_app(make_settings(tours_file, max_request_size_bytes=100))
        with TestClient(app) as client:
            response = client.post(TOURS, json={"name": "C"})

        assert response.status_code == 201


class TestRateLimiting:
    def test_limit_returns_429(self, tours_file: Path) -> None:
        app = create_app(
            make_settings(tours_file, rate_limit_enabled=True, rate_limit_default="2/minute")
        )
        with TestClient(app) as client:
            statuses = [client.get(TOURS).status_code for _ in range(3)]
            blocked = client.get(TOURS)

        assert statuses == [200, 200, 429]
        assert blocked.status_code == 429
        assert blocked.json()["status"] == "fail"
        assert "Too many requests" in blocked.json()["message"]

    def test_budget_is_shared_across_routes(self, tours_file: Path) -> None:
        app = create_app(
            make_settings(tours_file, rate_limit_enabled=True, rate_limit_default="3/minute")
        )
        with TestClient(app) as client:
            listed = client.get(TOURS)
            fetched = client.get(f"{TOURS}/1")
            created = client.post(TOURS, json={"name": "C"})
            health = client.get("/api/v1/health")
            count = len(read_tours(tours_file))

        assert [listed.status_code, fetched.status_code, created.status_code] == [200, 200, 201]
        assert health.status_code == 429
        assert health.json()["limit"].startswith("3 per")
        assert count == 3

    def test_blocked_write_is_not_applied(self, tours_file: Path) -> None:
        app = create_app(
            make_settings(tours_file, rate_limit_enabled=True, rate_limit_default="1/minute")
        )
        with TestClient(app) as client:
            client.get(TOURS)
            response = client.delete(f"{TOURS}/1")

        assert response.status_code == 429
        assert read_tours(tours_file) == SAMPLE_TOURS

    def test_unknown_paths_are_not_counted(self, tours_file: Path) -> None:
        app = create_app(
            make_settings(tours_file, rate_limit_enabled=True, rate_limit_default="1/minute")
        )
        with TestClient(app) as client:
            misses = [client.get("/api/v1/nothing-here").status_code for _ in range(3)]
            response = client.get(TOURS)

        assert misses == [404, 404, 404]
        assert response.status_code == 200

    def test_disabled_limiter_never_blocks(self, tours_file: Path) -> None:
        app = create_app(
            make_settings(tours_file, rate_limit_enabled=False, rate_limit_default="1/minute")
        )
        with TestClient(app) as client:
            statuses = {client.get(TOURS).status_code for _ in range(5)}

        assert statuses == {200}


class TestHealth:
    def test_health_reports_version_and_count(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": "0.1.0", "tours_loaded": 2}


class TestUnknownRoute:
    def test_unknown_path_is_jsend_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/nothing-here")

        assert response.status_code == 404
        assert response.json() == {
            "status": "fail",
            "message": "Can't find /api/v1/nothing-here on this server",
        }

    def test_wrong_method_is_405(self, client: TestClient) -> None:
        response = client.put(f"{TOURS}/1", json={})

        assert response.status_code == 405
        assert response.json()["status"] == "fail"


class TestRequestLogging:
    def test_logs_one_line_per_request(self, client: TestClient, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="natours.requests"):
            client.get(f"{TOURS}/1")

        lines = [r.getMessage() for r in caplog.records if r.name == "natours.requests"]
        assert len(lines) == 1
        assert lines[0].startswith("GET /api/v1/tours/1 200 ")


class TestStaticFiles:
    def test_serves_static_dir(self, tours_file: Path, tmp_path: Path) -> None:
        public = tmp_path / "public"
        (public / "js").mkdir(parents=True)
        (public / "index.html").write_text("<h1>Natours</h1>", encoding="utf-8")
        (public / "js" / "login.js").write_text("// login", encoding="utf-8")

        app = create_app(make_settings(tours_file, static_dir=public))
        with TestClient(app) as client:
            index = client.get("/")
            script = client.get("/js/login.js")
            api = client.get(TOURS)

        assert index.status_code == 200
        assert "Natours" in index.text
        assert script.text == "// login"
        assert api.status_code == 200
