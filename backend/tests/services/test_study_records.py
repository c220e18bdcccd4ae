"""Study Records — study lists, public timeline, likes and record comments.

Invariants:
    - A qualification is added to a study list once (second add → 409)
    - Private records appear in my-records only
    - Record bodies are rendered to content_html
"""

from uuid import uuid4


async def _record(client, headers, qualification, **overrides):
    payload = {
        "qualification_id": str(qualification.id),
        "title": "午前問題",
        "content": "* 過去問 **3年分**",
        "study_hours": 2.5,
        "mood": "🔥",
    }
    payload.update(overrides)
    res = await client.post("/api/v1/study-records", json=payload, headers=headers)
    assert res.status_code == 201
    return res.json()


async def test_add_qualification_once(client, alice, qualification, auth_headers):
    payload = {"qualification_id": str(qualification.id), "status": "studying"}
    first = await client.post(
        "/api/v1/study-records/add-qualification",
        json=payload, headers=auth_headers(alice),
    )
    assert first.status_code == 201
    assert first.json()["qualification"]["name"] == "基本情報技術者試験"

    second = await client.post(
        "/api/v1/study-records/add-qualification",
        json=payload, headers=auth_headers(alice),
    )
    assert second.status_code == 409

    mine = await client.get(
        "/api/v1/study-records/my-qualifications", headers=auth_headers(alice),
    )
    assert len(mine.json()) == 1


async def test_add_unknown_qualification_returns_404(client, alice, auth_headers):
    res = await client.post(
        "/api/v1/study-records/add-qualification",
        json={"qualification_id": str(uuid4())},
        headers=auth_headers(alice),
    )
    assert res.status_code == 404


async def test_create_record_renders_markdown(client, alice, qualification, auth_headers):
    record = await _record(client, auth_headers(alice), qualification)
    assert record["content_html"] == "<ul><li>過去問 <strong>3年分</strong></li></ul>"
    assert record["mood"] == "🔥"
    assert record["comments"] == []
    assert record["user"]["username"] == "alice"


async def test_private_record_only_in_my_records(
    client, alice, bob, qualification, auth_headers,
):
    await _record(client, auth_headers(alice), qualification, title="public")
    await _record(
        client, auth_headers(alice), qualification, title="private", is_public=False,
    )

    timeline = (await client.get("/api/v1/study-records/timeline")).json()
    assert [r["title"] for r in timeline["records"]] == ["public"]

    mine = await client.get(
        "/api/v1/study-records/my-records", headers=auth_headers(alice),
    )
    assert mine.json()["total"] == 2
    theirs = await client.get(
        "/api/v1/study-records/my-records", headers=auth_headers(bob),
    )
    assert theirs.json()["total"] == 0


async def test_timeline_filters_by_qualification(
    client, alice, qualification, auth_headers,
):
    await _record(client, auth_headers(alice), qualification)
    res = await client.get(
        "/api/v1/study-records/timeline",
        params={"qualification_id": str(uuid4())},
    )
    assert res.json()["records"] == []


async def test_record_with_unknown_qualification_returns_404(
    client, alice, auth_headers,
):
    res = await client.post(
        "/api/v1/study-records",
        json={"qualification_id": str(uuid4()), "title": "t", "content": "c"},
        headers=auth_headers(alice),
    )
    assert res.status_code == 404


async def test_record_hours_out_of_range_returns_400(
    client, alice, qualification, auth_headers,
):
    res = await client.post(
        "/api/v1/study-records",
        json={
            "qualification_id": str(qualification.id),
            "title": "t", "content": "c", "study_hours": 30,
        },
        headers=auth_headers(alice),
    )
    assert res.status_code == 400


async def test_record_like_and_comment(client, alice, bob, qualification, auth_headers):
    record = await _record(client, auth_headers(alice), qualification)

    like = await client.post(
        f"/api/v1/study-records/{record['id']}/like", headers=auth_headers(bob),
    )
    assert like.json() == {"likes": 1, "is_liked": True}

    comment = await client.post(
        f"/api/v1/study-records/{record['id']}/comment",
        json={"content": "  頑張って  "}, headers=auth_headers(bob),
    )
    assert comment.status_code == 201
    assert comment.json()["content"] == "頑張って"

    timeline = (await client.get("/api/v1/study-records/timeline")).json()
    (entry,) = timeline["records"]
    assert entry["likes"] == 1
    assert [c["content"] for c in entry["comments"]] == ["頑張って"]


async def test_comment_on_unknown_record_returns_404(client, alice, auth_headers):
    res = await client.post(
        f"/api/v1/study-records/{uuid4()}/comment",
        json={"content": "hi"}, headers=auth_headers(alice),
    )
    assert res.status_code == 404
