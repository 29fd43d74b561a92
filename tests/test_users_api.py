from conftest import post_freet, register

from fritter.stores import LikeCollection, UserCollection


class TestAccounts:
    def test_register_signs_in(self, client):
        user = register(client, "alice")

        assert user["username"] == "alice"
        assert "password" not in user
        assert user["freets"] == []

        session = client.get("/api/users/session").json()
        assert session["user"]["id"] == user["id"]

    def test_session_is_null_when_signed_out(self, client):
        response = client.get("/api/users/session")

        assert response.status_code == 200
        assert response.json()["user"] is None

    def test_username_taken_in_any_case(self, make_client):
        register(make_client(), "Alice")

        response = make_client().post("/api/users", json={"username": "ALICE", "password": "pw"})

        assert response.status_code == 409
        assert "already exists" in response.json()["error"]

    def test_register_rejects_malformed_input(self, client):
        response = client.post("/api/users", json={"username": "bad name", "password": "pw"})
        assert response.status_code == 400

        response = client.post("/api/users", json={"username": "alice", "password": "has space"})
        assert response.status_code == 400

        response = client.post("/api/users", json={"username": "alice"})
        assert response.status_code == 400

    def test_trailing_newline_is_not_a_valid_name(self, make_client):
        response = make_client().post("/api/users", json={"username": "alice\n", "password": "pw"})
        assert response.status_code == 400

        response = make_client().post("/api/users", json={"username": "alice", "password": "pw\n"})
        assert response.status_code == 400

        register(make_client(), "alice")
        response = make_client().post("/api/users", json={"username": "ALICE", "password": "pw"})
        assert response.status_code == 409

    def test_cannot_register_while_signed_in(self, client):
        register(client, "alice")

        response = client.post("/api/users", json={"username": "bob", "password": "pw"})

        assert response.status_code == 403

    def test_sign_out_and_in(self, client):
        register(client, "Alice", "pw")

        assert client.delete("/api/users/session").status_code == 200
        assert client.delete("/api/users/session").status_code == 403

        response = client.post("/api/users/session", json={"username": "alice", "password": "wrong"})
        assert response.status_code == 401

        response = client.post("/api/users/session", json={"username": "alice", "password": "pw"})
        assert response.status_code == 201
        assert response.json()["user"]["username"] == "Alice"

        response = client.post("/api/users/session", json={"username": "alice", "password": "pw"})
        assert response.status_code == 403

    def test_update_profile(self, make_client):
        alice = make_client()
        register(alice, "alice", "pw")
        register(make_client(), "bob")

        assert alice.patch("/api/users", json={"username": "BOB"}).status_code == 409
        assert alice.patch("/api/users", json={"username": "no way"}).status_code == 400

        response = alice.patch("/api/users", json={"username": "ALICE", "password": "new"})
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "ALICE"

        alice.delete("/api/users/session")
        assert alice.post("/api/users/session", json={"username": "alice", "password": "new"}).status_code == 201

    def test_update_requires_sign_in(self, client):
        assert client.patch("/api/users", json={"username": "x"}).status_code == 403


class TestAccountDeletion:
    def test_posts_are_removed_but_likes_remain(self, make_client, db):
        alice, bob = make_client(), make_client()
        alice_user = register(alice, "alice")
        register(bob, "bob")

        bobs_freet = post_freet(bob, "bob was here")
        alices_freet = post_freet(alice, "hello")
        alice.post("/api/quotes", json={"ref_id": bobs_freet["id"], "content": "hi bob", "anon": False})
        assert alice.post(f"/api/likes/Freet/{bobs_freet['id']}").status_code == 201
        bob.post("/api/users/follow/alice")
        bob.post(f"/api/users/highlights/{alices_freet['id']}")

        response = alice.delete("/api/users")

        assert response.status_code == 200
        assert alice.get("/api/users/session").json()["user"] is None
        assert bob.get("/api/freets", params={"author": "alice"}).status_code == 404
        assert [f["author"] for f in bob.get("/api/freets").json()] == ["bob"]
        assert bob.get("/api/quotes").json() == []

        # Left in place: the like, bob's follow and bob's highlight
        assert len(LikeCollection.find_all_by_liker(db, alice_user["id"])) == 1
        bob_user = UserCollection.find_one_by_username(db, "bob")
        assert bob_user.following == [alice_user["id"]]
        assert bob_user.highlights == [alices_freet["id"]]

    def test_requires_sign_in(self, client):
        assert client.delete("/api/users").status_code == 403


class TestHighlights:
    def test_highlight_and_unhighlight(self, client):
        register(client, "alice")
        first = post_freet(client, "first")
        second = post_freet(client, "second")

        response = client.post(f"/api/users/highlights/{second['id']}")
        assert response.status_code == 200
        assert response.json()["highlights"] == [second["id"]]

        highlights = client.get("/api/users/highlights", params={"author": "ALICE"}).json()
        assert [f["id"] for f in highlights] == [second["id"]]

        client.delete(f"/api/users/highlights/{second['id']}")
        assert client.get("/api/users/highlights", params={"author": "alice"}).json() == []
        assert first["id"] != second["id"]

    def test_missing_freet_can_be_highlighted(self, client):
        register(client, "alice")

        response = client.post("/api/users/highlights/4040")

        assert response.status_code == 200
        assert response.json()["highlights"] == [4040]

    def test_author_checks(self, client):
        assert client.get("/api/users/highlights").status_code == 400
        assert client.get("/api/users/highlights", params={"author": "nobody"}).status_code == 404
        assert client.post("/api/users/highlights/1").status_code == 403


class TestFollow:
    def test_follow_and_unfollow(self, make_client):
        alice = make_client()
        register(alice, "alice")
        bob_user = register(make_client(), "bob")

        response = alice.post("/api/users/follow/Bob")
        assert response.status_code == 200
        assert response.json()["following"] == [bob_user["id"]]

        alice.post("/api/users/follow/bob")
        assert alice.get("/api/users/follow").json()["following"] == [bob_user["id"]]

        response = alice.delete("/api/users/follow/bob")
        assert response.json()["following"] == []

    def test_follow_unknown_user(self, client):
        register(client, "alice")

        assert client.post("/api/users/follow/nobody").status_code == 404

    def test_follow_requires_sign_in(self, client):
        assert client.post("/api/users/follow/alice").status_code == 403
        assert client.get("/api/users/follow").status_code == 403
