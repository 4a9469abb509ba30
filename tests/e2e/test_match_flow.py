"""End-to-end tests for suggestions, partnership requests and invitations."""


class TestSuggestions:
    """End-to-end tests for partner suggestions."""

    def test_no_other_users_returns_empty_list(self, client, register):
        _, headers = register("Alice", "alice@example.com")

        response = client.get("/match/suggestions", headers=headers)

        assert response.status_code == 200
        assert response.json() == {"matches": []}

    def test_suggestions_exclude_self_and_respect_limit(self, client, register):
        alice_id, alice = register("Alice", "alice@example.com", bio="Running")
        register("Bob", "bob@example.com", bio="Running marathons")
        register("Carol", "carol@example.com")

        response = client.get("/match/suggestions?limit=1", headers=alice)

        assert response.status_code == 200
        matches = response.json()["matches"]
        assert len(matches) == 1
        assert matches[0]["id"] != alice_id
        assert 0 <= matches[0]["compatibility_score"] <= 100

    def test_limit_out_of_range(self, client, register):
        _, headers = register("Alice", "alice@example.com")

        assert client.get("/match/suggestions?limit=0", headers=headers).status_code == 422
        assert client.get("/match/suggestions?limit=51", headers=headers).status_code == 422


class TestPartnershipFlow:
    """Request, accept and unmatch through the API."""

    def test_full_lifecycle(self, client, register):
        alice_id, alice = register("Alice", "alice@example.com")
        bob_id, bob = register("Bob", "bob@example.com")

        # Alice asks Bob
        sent = client.post(
            "/match/request", json={"partner_id": bob_id}, headers=alice
        )
        assert sent.status_code == 201
        assert sent.json()["direction"] == "sent"
        assert sent.json()["status"] == "pending"
        request_id = sent.json()["id"]

        duplicate = client.post(
            "/match/request", json={"partner_id": alice_id}, headers=bob
        )
        assert duplicate.status_code == 400

        received = client.get("/match/requests", headers=bob).json()["requests"]
        assert [r["id"] for r in received] == [request_id]
        assert received[0]["direction"] == "received"
        assert received[0]["sender"]["name"] == "Alice"

        # Only the receiver may accept
        forbidden = client.post(f"/match/requests/{request_id}/accept", headers=alice)
        assert forbidden.status_code == 403

        accepted = client.post(f"/match/requests/{request_id}/accept", headers=bob)
        assert accepted.status_code == 200
        assert accepted.json()["partner"]["id"] == alice_id

        again = client.post(f"/match/requests/{request_id}/accept", headers=bob)
        assert again.status_code == 400

        me = client.get("/users/me", headers=alice).json()
        assert me["partner"]["id"] == bob_id
        assert client.get("/match/suggestions", headers=alice).status_code == 400

        unmatched = client.post("/match/unmatch", headers=bob)
        assert unmatched.status_code == 200
        assert unmatched.json()["former_partner_id"] == alice_id

        assert client.get("/users/me", headers=alice).json()["partner"] is None
        assert client.post("/match/unmatch", headers=alice).status_code == 400
        assert client.get("/match/suggestions", headers=alice).status_code == 200

    def test_reject(self, client, register):
        _, alice = register("Alice", "alice@example.com")
        bob_id, bob = register("Bob", "bob@example.com")
        request_id = client.post(
            "/match/request", json={"partner_id": bob_id}, headers=alice
        ).json()["id"]

        response = client.post(f"/match/requests/{request_id}/reject", headers=bob)

        assert response.status_code == 200
        assert client.get("/match/requests", headers=bob).json() == {"requests": []}

    def test_request_to_self(self, client, register):
        alice_id, alice = register("Alice", "alice@example.com")

        response = client.post(
            "/match/request", json={"partner_id": alice_id}, headers=alice
        )

        assert response.status_code == 400

    def test_request_to_unknown_user(self, client, register):
        _, alice = register("Alice", "alice@example.com")

        response = client.post(
            "/match/request",
            json={"partner_id": "00000000-0000-0000-0000-000000000000"},
            headers=alice,
        )

        assert response.status_code == 404

    def test_accept_unknown_request(self, client, register):
        _, alice = register("Alice", "alice@example.com")

        response = client.post(
            "/match/requests/00000000-0000-0000-0000-000000000000/accept",
            headers=alice,
        )

        assert response.status_code == 404


class TestInvitationFlow:
    """Invite by email, validate the link and register through it."""

    def test_invite_and_register(self, client, register):
        alice_id, alice = register("Alice", "alice@example.com")

        invited = client.post(
            "/match/invite", json={"email": "Bob@Example.com"}, headers=alice
        )
        assert invited.status_code == 201
        data = invited.json()
        assert data["email"] == "bob@example.com"
        assert data["email_sent"] is True
        token = data["invitation_url"].split("inviteToken=")[1]

        validated = client.get(f"/invitations/{token}")
        assert validated.status_code == 200
        assert validated.json()["valid"] is True
        assert validated.json()["inviter_name"] == "Alice"
        assert validated.json()["email"] == "bob@example.com"

        bob_id, bob = register("Bob", "bob@example.com", invite_token=token)

        me = client.get("/users/me", headers=bob).json()
        assert me["partner"]["id"] == alice_id

        accepted = client.get("/invitations?status=accepted", headers=alice).json()
        assert len(accepted["invitations"]) == 1
        assert accepted["invitations"][0]["accepted_at"] is not None

        reused = client.get(f"/invitations/{token}").json()
        assert reused["valid"] is False

    def test_register_with_invite_reports_partnership(self, client, register):
        _, alice = register("Alice", "alice@example.com")
        url = client.post(
            "/match/invite", json={"email": "bob@example.com"}, headers=alice
        ).json()["invitation_url"]
        token = url.split("inviteToken=")[1]

        response = client.post(
            "/auth/register",
            json={
                "name": "Bob",
                "email": "bob@example.com",
                "password": "correct horse battery",
                "invite_token": token,
            },
        )

        assert response.status_code == 201
        assert response.json()["partnership_created"] is True
        assert response.json()["partner"]["name"] == "Alice"

    def test_invite_registered_email(self, client, register):
        _, alice = register("Alice", "alice@example.com")
        register("Bob", "bob@example.com")

        response = client.post(
            "/match/invite", json={"email": "bob@example.com"}, headers=alice
        )

        assert response.status_code == 400

    def test_unknown_invitation_token(self, client):
        response = client.get("/invitations/" + "ab" * 32)

        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_list_invitations_requires_auth(self, client):
        assert client.get("/invitations").status_code == 401
