"""End-to-end tests for invites and redemption."""

GUEST = "guest@example.com"


def _invite(owner_client, role="viewer", email=GUEST):
    return owner_client.post(
        "/invites", json={"resourceId": "obj-1", "email": email, "role": role}
    )


class TestInviteFlow:
    """Owner invites by email, guest redeems with a comment."""

    def test_create_and_redeem(self, owner_client, client):
        created = _invite(owner_client)
        assert created.status_code == 201
        token = created.json()["token"]
        assert created.json()["link"].endswith(f"/invite/{token}")

        redeemed = client.post(
            "/redeem",
            json={"token": token, "body": "Happy to help", "resourceId": "obj-1"},
        )

        assert redeemed.status_code == 200
        assert redeemed.json()["ok"] is True
        assert redeemed.json()["comment"]["author"] == "guest@example.com (guest)"

    def test_redeem_via_query_string(self, owner_client, client):
        token = _invite(owner_client, role="editor").json()["token"]

        response = client.get("/redeem", params={"token": token, "body": "On it"})

        assert response.status_code == 200

    def test_unknown_invite(self, client):
        response = client.post("/redeem", json={"token": "nope", "body": "Hi"})

        assert response.status_code == 403
        assert response.json()["title"] == "Access Restricted"

    def test_invite_for_other_objective(self, owner_client, client):
        token = _invite(owner_client).json()["token"]

        response = client.post(
            "/redeem", json={"token": token, "body": "Hi", "resourceId": "obj-2"}
        )

        assert response.status_code == 403

    def test_invalid_email(self, owner_client):
        response = _invite(owner_client, email="not-an-email")

        assert response.status_code == 400
        assert response.json()["field"] == "email"

    def test_list_invites(self, owner_client):
        _invite(owner_client)

        response = owner_client.get("/invites", params={"resource_id": "obj-1"})

        assert response.status_code == 200
        assert response.json()["total"] == 1
