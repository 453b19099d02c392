"""Unit tests for exception handlers."""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from api.exception_handlers import setup_exception_handlers
from core.exceptions import AlreadyLikedError, PersistenceError, PostNotFoundError


def _create_test_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)
    return app


async def _get(app: FastAPI, path: str):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        return await c.get(path)


class TestExceptionHandlers:
    @pytest.mark.asyncio
    async def test_app_exception_returns_error_code_and_message(self) -> None:
        app = _create_test_app()

        @app.get("/raise-app")
        async def _() -> None:
            raise PostNotFoundError("some-id")

        response = await _get(app, "/raise-app")

        assert response.status_code == 404
        body = response.json()
        assert body["error_code"] == "POST_NOT_FOUND"
        assert "some-id" in body["message"]
        assert body["details"]["post_id"] == "some-id"

    @pytest.mark.asyncio
    async def test_conflict_maps_to_409(self) -> None:
        app = _create_test_app()

        @app.get("/raise-conflict")
        async def _() -> None:
            raise AlreadyLikedError("some-id")

        response = await _get(app, "/raise-conflict")

        assert response.status_code == 409
        assert response.json()["error_code"] == "ALREADY_LIKED"

    @pytest.mark.asyncio
    async def test_persistence_error_hides_driver_detail(self) -> None:
        app = _create_test_app()

        @app.get("/raise-db")
        async def _() -> None:
            raise PersistenceError()

        response = await _get(app, "/raise-db")

        assert response.status_code == 500
        assert response.json() == {
            "error_code": "DATABASE_ERROR",
            "message": "Server error",
            "details": None,
        }

    @pytest.mark.asyncio
    async def test_http_exception_returns_standard_format(self) -> None:
        from starlette.exceptions import HTTPException

        app = _create_test_app()

        @app.get("/raise-http")
        async def _() -> None:
            raise HTTPException(status_code=403, detail="Forbidden")

        response = await _get(app, "/raise-http")

        assert response.status_code == 403
        body = response.json()
        assert body["error_code"] == "HTTP_ERROR"
        assert body["message"] == "Forbidden"

    @pytest.mark.asyncio
    async def test_validation_error_returns_400_with_field_details(self) -> None:
        from pydantic import BaseModel

        app = _create_test_app()

        class Body(BaseModel):
            text: str

        @app.post("/validate")
        async def _(body: Body) -> dict[str, bool]:
            return {"ok": True}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.post("/validate", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["field"] == "body.text"

    @pytest.mark.asyncio
    async def test_unhandled_exception_returns_generic_500(self) -> None:
        app = _create_test_app()

        mock_request = MagicMock()
        mock_request.state.request_id = "test-req-id"

        handler = app.exception_handlers.get(Exception)
        assert handler is not None, "Global exception handler not registered"

        response = await handler(mock_request, RuntimeError("password=hunter2"))  # type: ignore[misc]

        assert response.status_code == 500
        body = json.loads(response.body)
        assert body["error_code"] == "INTERNAL_ERROR"
        assert body["message"] == "Server error"
        assert body["details"]["request_id"] == "test-req-id"
