"""Users — registration, profiles, stats and the symmetric follow graph.

Invariants:
    - Follow updates follower.following and target.followers together
    - Following again removes both sides together
    - Self-follow → 400 SELF_FOLLOW; unknown target → 404
    - Missing or unknown X-User-Id → 401
"""

from uuid import uuid4


async def test_register_returns_201(client):
    res = await client.post(
        "/api/v1/users", json={"username": "hanako", "email": "Hanako@Example.JP"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["username"] == "hanako"
    assert body["followers_count"] == 0
    assert "email" not in body


async def test_register_duplicate_username_returns_409(client, alice):
    res = await client.post(
        "/api/v1/users", json={"username": "alice", "email": "other@example.jp"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"


async def test_register_invalid_payload_returns_400(client):
    res = await client.post(
        "/api/v1/users", json={"username": "a", "email": "x"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_unknown_user_returns_404(client):
    res = await client.get(f"/api/v1/users/{uuid4()}")
    assert res.status_code == 404


async def test_follow_updates_both_sides(client, alice, bob, auth_headers):
    res = await client.post(
        f"/api/v1/users/{bob.id}/follow", headers=auth_headers(alice),
    )
    assert res.status_code == 200
    assert res.json() == {
        "message": "Followed",
        "is_following": True,
        "followers_count": 1,
        "following_count": 1,
    }

    alice_view = (await client.get(f"/api/v1/users/{alice.id}")).json()
    bob_view = (await client.get(f"/api/v1/users/{bob.id}")).json()
    assert alice_view["following"] == [str(bob.id)]
    assert bob_view["followers"] == [str(alice.id)]


async def test_second_follow_removes_both_sides(client, alice, bob, auth_headers):
    url = f"/api/v1/users/{bob.id}/follow"
    await client.post(url, headers=auth_headers(alice))
    res = await client.post(url, headers=auth_headers(alice))

    assert res.json()["message"] == "Unfollowed"
    assert res.json()["is_following"] is False
    alice_view = (await client.get(f"/api/v1/users/{alice.id}")).json()
    bob_view = (await client.get(f"/api/v1/users/{bob.id}")).json()
    assert alice_view["following"] == []
    assert bob_view["followers"] == []


async def test_follow_listings(client, alice, bob, auth_headers):
    await client.post(f"/api/v1/users/{bob.id}/follow", headers=auth_headers(alice))

    following = (await client.get(f"/api/v1/users/{alice.id}/following")).json()
    followers = (await client.get(f"/api/v1/users/{bob.id}/followers")).json()
    assert following == [{"id": str(bob.id), "username": "bob"}]
    assert followers == [{"id": str(alice.id), "username": "alice"}]


async def test_self_follow_returns_400(client, alice, auth_headers):
    res = await client.post(
        f"/api/v1/users/{alice.id}/follow", headers=auth_headers(alice),
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "SELF_FOLLOW"


async def test_follow_unknown_user_returns_404(client, alice, auth_headers):
    res = await client.post(
        f"/api/v1/users/{uuid4()}/follow", headers=auth_headers(alice),
    )
    assert res.status_code == 404


async def test_follow_without_identity_returns_401(client, bob):
    res = await client.post(f"/api/v1/users/{bob.id}/follow")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_unknown_identity_returns_401(client, bob):
    res = await client.post(
        f"/api/v1/users/{bob.id}/follow", headers={"X-User-Id": str(uuid4())},
    )
    assert res.status_code == 401


async def test_malformed_identity_returns_401(client, bob):
    res = await client.post(
        f"/api/v1/users/{bob.id}/follow", headers={"X-User-Id": "not-a-uuid"},
    )
    assert res.status_code == 401


async def test_update_profile(client, alice, auth_headers):
    res = await client.put(
        "/api/v1/users/profile",
        json={
            "bio": "  iOS engineer  ",
            "study_goals": ["AWS"],
            "certifications": [{"name": "TOEIC", "status": "passed"}],
        },
        headers=auth_headers(alice),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["bio"] == "iOS engineer"
    assert body["study_goals"] == ["AWS"]
    assert body["certifications"] == [{"name": "TOEIC", "status": "passed"}]


async def test_add_certification_appends(client, alice, auth_headers):
    headers = auth_headers(alice)
    await client.post(
        "/api/v1/users/certifications",
        json={"name": "FP2級", "status": "studying"}, headers=headers,
    )
    res = await client.post(
        "/api/v1/users/certifications",
        json={"name": "簿記2級", "status": "planning"}, headers=headers,
    )
    assert [c["name"] for c in res.json()] == ["FP2級", "簿記2級"]


async def test_user_stats_count_likes_across_articles(client, alice, bob, auth_headers):
    ids = []
    for title in ("one", "two"):
        res = await client.post(
            "/api/v1/articles",
            json={"title": title, "content": "body"}, headers=auth_headers(alice),
        )
        ids.append(res.json()["id"])
    for article_id in ids:
        await client.post(
            f"/api/v1/articles/{article_id}/like", headers=auth_headers(bob),
        )

    res = await client.get(f"/api/v1/users/stats/{alice.id}")
    assert res.json() == {"article_count": 2, "total_likes": 2}
