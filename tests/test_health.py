def test_health_endpoint_returns_ok(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "service" in body
    assert "version" in body
    assert "environment" in body


def test_health_body_keys_are_fixed(client):
    body = client.get("/health").json()

    assert set(body) == {"status", "service", "version", "environment"}
