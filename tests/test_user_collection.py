from fritter.stores import FreetCollection, UserCollection


def test_add_one_starts_with_empty_sets(db):
    user = UserCollection.add_one(db, "alice", "pw")

    assert user.id is not None
    assert user.date_joined is not None
    assert user.following == []
    assert user.freets == []
    assert user.quotes == []
    assert user.highlights == []


def test_username_lookup_is_case_insensitive_and_trimmed(db):
    alice = UserCollection.add_one(db, "Alice", "pw")

    assert UserCollection.find_one_by_username(db, " alice ").id == alice.id
    assert UserCollection.find_one_by_username(db, "ALICE").id == alice.id
    assert UserCollection.find_one_by_username(db, "alic") is None
    assert UserCollection.find_one_by_username(db, "") is None
    assert UserCollection.find_one_by_username(db, None) is None


def test_username_lookup_is_not_a_pattern(db):
    UserCollection.add_one(db, "alice", "pw")

    assert UserCollection.find_one_by_username(db, "a%") is None
    assert UserCollection.find_one_by_username(db, "a.*") is None


def test_credential_check(db):
    alice = UserCollection.add_one(db, "Alice", "pw")

    assert UserCollection.find_one_by_username_and_password(db, "alice", "pw").id == alice.id
    assert UserCollection.find_one_by_username_and_password(db, "alice", "PW") is None
    assert UserCollection.find_one_by_username_and_password(db, "bob", "pw") is None


def test_update_one_is_partial(db):
    alice = UserCollection.add_one(db, "alice", "pw")

    updated = UserCollection.update_one(db, alice.id, password="new")
    assert updated.username == "alice"
    assert updated.password == "new"

    updated = UserCollection.update_one(db, alice.id, username="alicia")
    assert updated.username == "alicia"
    assert updated.password == "new"


def test_delete_one_leaves_posts_behind(db):
    alice_id = UserCollection.add_one(db, "alice", "pw").id
    freet = FreetCollection.add_one(db, alice_id, "hello")

    assert UserCollection.delete_one(db, alice_id) is True
    assert UserCollection.find_one_by_user_id(db, alice_id) is None
    assert FreetCollection.find_one(db, freet.id) is not None
    assert UserCollection.delete_one(db, alice_id) is False


def test_set_mutations_are_idempotent(db):
    alice = UserCollection.add_one(db, "alice", "pw")
    bob = UserCollection.add_one(db, "bob", "pw")

    UserCollection.add_follow(db, alice.id, bob.id)
    user = UserCollection.add_follow(db, alice.id, bob.id)
    assert user.following == [bob.id]

    user = UserCollection.delete_follow(db, alice.id, bob.id)
    assert user.following == []
    user = UserCollection.delete_follow(db, alice.id, bob.id)
    assert user.following == []

    UserCollection.create_highlight(db, alice.id, 42)
    user = UserCollection.create_highlight(db, alice.id, 42)
    assert user.highlights == [42]
    user = UserCollection.delete_highlight(db, alice.id, 7)
    assert user.highlights == [42]


def test_follow_is_one_directional(db):
    alice = UserCollection.add_one(db, "alice", "pw")
    bob = UserCollection.add_one(db, "bob", "pw")

    UserCollection.add_follow(db, alice.id, bob.id)

    assert UserCollection.find_one_by_user_id(db, bob.id).following == []


def test_set_mutation_on_missing_user_returns_none(db):
    assert UserCollection.add_freet(db, 999, 1) is None
    assert UserCollection.delete_many_freet(db, 999) is None
    assert UserCollection.delete_many_quote(db, 999) is None


def test_find_highlights_only_returns_own_highlighted_freets(db):
    alice = UserCollection.add_one(db, "alice", "pw")
    bob = UserCollection.add_one(db, "bob", "pw")
    first = FreetCollection.add_one(db, alice.id, "first")
    second = FreetCollection.add_one(db, alice.id, "second")
    bobs = FreetCollection.add_one(db, bob.id, "bob's")

    UserCollection.create_highlight(db, alice.id, second.id)
    UserCollection.create_highlight(db, alice.id, bobs.id)
    UserCollection.create_highlight(db, alice.id, 12345)

    highlights = UserCollection.find_highlights(db, "ALICE")

    assert [freet.id for freet in highlights] == [second.id]
    assert first.id not in [freet.id for freet in highlights]
    assert UserCollection.find_highlights(db, "nobody") == []
