from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_api.errors import NotFoundError, UserApiError, ValidationError, register_error_handlers


def _app_raising(exc: Exception) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom():
        raise exc

    return app


def test_error_envelopes():
    assert ValidationError().to_response() == {"error": "Name and email are required"}
    assert NotFoundError("User not found").to_response() == {"error": "User not found"}
    assert issubclass(ValidationError, UserApiError)
    assert NotFoundError("x").http_status == 404


def test_domain_error_rendered_with_its_status():
    client = TestClient(_app_raising(NotFoundError("Thing not found")))
    resp = client.get("/boom")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Thing not found"}


def test_unhandled_error_is_hidden():
    client = TestClient(_app_raising(RuntimeError("secret detail")), raise_server_exceptions=False)
    resp = client.get("/boom")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "secret" not in resp.text
