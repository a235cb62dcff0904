"""End-to-end tests for the collaborator roster."""

MEMBERS = "/objectives/obj-1/members"


class TestMembers:
    """Owner manages named collaborators."""

    def test_add_list_remove(self, owner_client):
        added = owner_client.post(
            MEMBERS, json={"email": "ann@example.com", "role": "editor"}
        )
        assert added.status_code == 201
        assert added.json()["member"]["role"] == "editor"

        listed = owner_client.get(MEMBERS)
        assert [m["email"] for m in listed.json()["members"]] == ["ann@example.com"]

        removed = owner_client.delete(MEMBERS, params={"email": "ann@example.com"})
        assert removed.json() == {"ok": True, "removed": True}
        assert owner_client.get(MEMBERS).json()["members"] == []

    def test_add_shows_in_activity(self, owner_client):
        owner_client.post(MEMBERS, json={"email": "ann@example.com", "role": "viewer"})

        response = owner_client.get("/objectives/obj-1/activity")

        entry = response.json()["activity"][0]
        assert entry["kind"] == "invite"
        assert entry["data"] == {"email": "ann@example.com", "role": "viewer"}

    def test_invalid_role(self, owner_client):
        response = owner_client.post(
            MEMBERS, json={"email": "ann@example.com", "role": "owner"}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "role"

    def test_requires_owner_cookie(self, client, objective):
        assert client.get(MEMBERS).status_code == 401
