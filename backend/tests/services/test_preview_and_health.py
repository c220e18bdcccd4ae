"""Markdown preview endpoint and health probes."""


async def test_preview_renders_markdown(client):
    res = await client.post(
        "/api/v1/preview", json={"content": "# Hi\n\n* a\n* b"},
    )
    assert res.status_code == 200
    assert res.json() == {"html": "<h1>Hi</h1>\n<ul><li>a</li>\n<li>b</li></ul>"}


async def test_preview_empty_content(client):
    res = await client.post("/api/v1/preview", json={})
    assert res.json() == {"html": ""}


async def test_liveness(client):
    res = await client.get("/api/v1/health/")
    assert res.status_code == 200
    assert res.json()["service"] == "certstudy-api"


async def test_readiness_with_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_without_database(client, monkeypatch):
    import app.infrastructure.database as db_module
    monkeypatch.setattr(db_module, "db_manager", None)
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_validation_error_envelope(client):
    res = await client.post("/api/v1/preview", json={"content": 42})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "body.content"
