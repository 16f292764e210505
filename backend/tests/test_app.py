def test_root(client):
    rv = client.get("/")
    assert rv.status_code == 200
    assert rv.json()["name"] == "Plant Care API"


def test_health(client):
    rv = client.get("/health")
    assert rv.status_code == 200
    body = rv.json()
    assert body["status"] == "ok"
    assert body["database"] == "ok"
    assert body["timestamp"]


def test_request_id_is_echoed(client):
    rv = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert rv.headers["X-Request-ID"] == "abc-123"
    assert client.get("/").headers["X-Request-ID"]


def test_security_headers(client):
    rv = client.get("/")
    assert rv.headers["X-Content-Type-Options"] == "nosniff"
    assert rv.headers["X-Frame-Options"] == "DENY"
    assert rv.headers["Permissions-Policy"] == "camera=(), microphone=(), geolocation=()"


def test_malformed_json_is_bad_request(client):
    rv = client.post("/species", content="{not json", headers={"Content-Type": "application/json"})
    assert rv.status_code == 400
    assert "detail" in rv.json()


def test_invalid_uuid_is_bad_request(client):
    assert client.get("/plants/not-a-uuid").status_code == 400
