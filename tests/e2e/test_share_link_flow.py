"""End-to-end tests for share links."""

ACCESS_RESTRICTED = {
    "title": "Access Restricted",
    "detail": "This link has been revoked or expired",
}


def _token(url: str) -> str:
    return url.rsplit("/", 1)[-1]


class TestShareLinkFlow:
    """Owner shares, guest opens, owner revokes."""

    def test_copy_link_is_idempotent(self, owner_client):
        """Copying the share link twice yields the same URL."""
        first = owner_client.post("/links/obj-1", params={"role": "viewer"})
        second = owner_client.post("/links/obj-1", params={"role": "viewer"})

        assert first.status_code == 200
        assert first.json()["url"] == second.json()["url"]
        assert first.json()["url"].startswith("http://localhost:5173/share/")
        assert len(_token(first.json()["url"])) == 40

    def test_guest_opens_viewer_link(self, owner_client, client):
        url = owner_client.post("/links/obj-1", params={"role": "viewer"}).json()[
            "url"
        ]

        response = client.get(f"/share/{_token(url)}")

        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "viewer"
        assert data["can_comment"] is True
        assert data["can_edit"] is False
        assert data["objective"]["id"] == "obj-1"

    def test_revoke_then_reissue(self, owner_client, client):
        """After revocation the old URL is dead and a new one is issued."""
        old = owner_client.post("/links/obj-1", params={"role": "viewer"}).json()
        old_token = _token(old["url"])

        revoked = owner_client.post("/links/revoke", params={"token": old_token})
        assert revoked.status_code == 200
        assert revoked.json()["ok"] is True

        response = client.get(f"/share/{old_token}")
        assert response.status_code == 403
        assert response.json() == ACCESS_RESTRICTED

        new = owner_client.post("/links/obj-1", params={"role": "viewer"}).json()
        assert _token(new["url"]) != old_token
        assert client.get(f"/share/{_token(new['url'])}").status_code == 200

    def test_revoke_by_role(self, owner_client, client):
        url = owner_client.post("/links/obj-1", params={"role": "editor"}).json()[
            "url"
        ]

        response = owner_client.delete("/links/obj-1", params={"role": "editor"})

        assert response.json()["revoked"] is True
        assert client.get(f"/share/{_token(url)}").status_code == 403

    def test_unknown_token_looks_like_revoked(self, client):
        """Probing tokens gives the same response as a revoked link."""
        response = client.get("/share/" + "a" * 40)

        assert response.status_code == 403
        assert response.json() == ACCESS_RESTRICTED

    def test_viewer_can_comment_but_not_edit(self, owner_client, client):
        url = owner_client.post("/links/obj-1", params={"role": "viewer"}).json()[
            "url"
        ]
        token = _token(url)

        comment = client.post(
            f"/share/{token}/comments",
            json={"body": "Nice progress", "email": "guest@example.com"},
        )
        edit = client.patch(f"/share/{token}/objective", json={"title": "Mine now"})

        assert comment.status_code == 201
        assert comment.json()["comment"]["author"] == "guest@example.com (guest)"
        assert edit.status_code == 403
        assert edit.json()["detail"] == "This link does not allow that action"

    def test_editor_can_edit(self, owner_client, client):
        url = owner_client.post("/links/obj-1", params={"role": "editor"}).json()[
            "url"
        ]

        response = client.patch(
            f"/share/{_token(url)}/objective",
            json={"status": "in_progress", "completion_percentage": 25},
        )

        assert response.status_code == 200
        assert response.json()["objective"]["status"] == "in_progress"
        assert response.json()["objective"]["completion_percentage"] == 25

    def test_access_trail_and_activity(self, owner_client, client):
        created = owner_client.post("/links/obj-1", params={"role": "viewer"}).json()
        client.get(
            f"/share/{_token(created['url'])}", params={"email": "guest@example.com"}
        )

        access = owner_client.get(
            "/links/obj-1/access", params={"link_id": created["link"]["link_id"]}
        )
        activity = owner_client.get("/objectives/obj-1/activity")

        assert [r["email"] for r in access.json()["records"]] == [
            "guest@example.com"
        ]
        assert activity.json()["activity"][0]["kind"] == "link_created"


class TestOwnerAuth:
    """Owner routes require the auth cookie."""

    def test_missing_cookie(self, client, objective):
        response = client.post("/links/obj-1", params={"role": "viewer"})

        assert response.status_code == 401

    def test_invalid_cookie(self, client, objective):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.get("/links/obj-1")

        assert response.status_code == 401

    def test_invalid_role(self, owner_client):
        response = owner_client.post("/links/obj-1", params={"role": "admin"})

        assert response.status_code == 400
        assert response.json()["field"] == "role"

    def test_expiry_out_of_range(self, owner_client):
        """An absurd lifetime is a field error, not a server error."""
        response = owner_client.post(
            "/links/obj-1", params={"role": "viewer", "expires_in_days": 5000000}
        )

        assert response.status_code == 400
        assert response.json()["field"] == "expires_in_days"

    def test_expiry_in_days(self, owner_client):
        response = owner_client.post(
            "/links/obj-1", params={"role": "editor", "expires_in_days": 3650}
        )

        assert response.status_code == 200
        assert response.json()["link"]["expires_at"] is not None

    def test_unknown_objective(self, owner_client):
        response = owner_client.post("/links/missing", params={"role": "viewer"})

        assert response.status_code == 404
