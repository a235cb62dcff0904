"""End-to-end test for the health endpoint."""


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["local_mode"] is False
