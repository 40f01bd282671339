"""Pruebas del middleware de registro en Axiom.

Axiom logging middleware tests — masking, skipped paths and event content.
"""

from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from agenda.middleware.axiom_logging import AxiomLoggingMiddleware, mask_sensitive, truncate
from agenda.utils.exceptions import NotFoundError


class FakeAxiom:
    def __init__(self, fail: bool = False) -> None:
        self.events: list[dict] = []
        self.fail = fail

    def ingest_events(self, dataset, events):
        if self.fail:
            raise RuntimeError("axiom caído")
        self.events.extend(events)


def _build_app(fake: FakeAxiom) -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware, client=fake)

    @app.post("/api/auth/login")
    async def login(body: dict) -> dict:
        return {"ok": True}

    @app.get("/api/profesionales/{profesional_id}")
    async def missing(profesional_id: str) -> dict:
        raise NotFoundError("Profesional no encontrado")

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok"}

    return app


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestMasking:

    def test_mask_nested_sensitive_keys(self):
        data = {"nombre_usuario": "admin", "password": "x", "extra": {"access_token": "t"}}
        assert mask_sensitive(data) == {
            "nombre_usuario": "admin",
            "password": "***",
            "extra": {"access_token": "***"},
        }

    def test_mask_limits_list_length(self):
        assert len(mask_sensitive(list(range(50)))) == 20

    def test_truncate(self):
        assert truncate("a" * 10, max_len=5) == "aaaaa...(truncated)"
        assert truncate(42) == 42


class TestMiddleware:

    async def test_logs_masked_body(self):
        fake = FakeAxiom()
        async with _client(_build_app(fake)) as ac:
            res = await ac.post("/api/auth/login", json={"nombre_usuario": "a", "password": "secreto"})
        assert res.status_code == 200
        [event] = fake.events
        assert event["method"] == "POST"
        assert event["path"] == "/api/auth/login"
        assert event["status_code"] == 200
        assert event["request_body"] == {"nombre_usuario": "a", "password": "***"}
        assert "duration_ms" in event

    async def test_logs_error_detail(self):
        fake = FakeAxiom()
        async with _client(_build_app(fake)) as ac:
            res = await ac.get("/api/profesionales/abc")
        assert res.status_code == 404
        assert res.json() == {"detail": "Profesional no encontrado"}
        assert fake.events[0]["error"] == "Profesional no encontrado"

    async def test_skips_health(self):
        fake = FakeAxiom()
        async with _client(_build_app(fake)) as ac:
            await ac.get("/api/health")
        assert fake.events == []

    async def test_ingest_failure_does_not_break_request(self):
        fake = FakeAxiom(fail=True)
        async with _client(_build_app(fake)) as ac:
            res = await ac.post("/api/auth/login", json={"nombre_usuario": "a", "password": "b"})
        assert res.status_code == 200
