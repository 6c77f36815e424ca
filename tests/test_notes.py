def create(client, user_id="user-1", title="Groceries", content="Milk, eggs"):
    return client.post("/api/ai_notes", params={"user_id": user_id}, json={"title": title, "content": content})


def test_create_and_list_notes(client):
    first = create(client, title="First")
    second = create(client, title="Second")
    create(client, user_id="user-2", title="Someone else")

    assert first.status_code == 201
    assert first.json()["user_id"] == "user-1"

    resp = client.get("/api/ai_notes", params={"user_id": "user-1"})

    assert resp.status_code == 200
    assert [note["title"] for note in resp.json()] == ["Second", "First"]
    assert resp.headers["Cache-Control"] == "public, max-age=0, s-maxage=300, stale-while-revalidate=59"
    assert second.json()["id"] != first.json()["id"]


def test_create_note_trims_fields(client):
    note = create(client, title="  Padded  ", content="  body  ").json()

    assert note["title"] == "Padded"
    assert note["content"] == "body"


def test_title_too_long(client, db):
    resp = create(client, title="x" * 256)

    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["error"] == "Title too long"
    assert db.tables.get("ai_notes", []) == []


def test_content_too_long(client):
    resp = create(client, content="x" * 10001)

    assert resp.status_code == 400
    assert resp.json()["error"] == "Content too long"


def test_missing_title_or_content(client):
    resp = create(client, content="")

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing title or content"


def test_whitespace_only_fields_are_rejected(client, db):
    for title, content in [("   ", "body"), ("Groceries", " \n\t ")]:
        resp = create(client, title=title, content=content)

        assert resp.status_code == 400
        assert resp.json()["code"] == "VALIDATION_ERROR"
    assert db.tables.get("ai_notes", []) == []


def test_update_with_blank_title_is_rejected(client):
    note_id = create(client).json()["id"]

    resp = client.put(
        f"/api/ai_notes/{note_id}",
        params={"user_id": "user-1"},
        json={"title": "  ", "content": "Milk"},
    )

    assert resp.status_code == 400
    assert resp.json()["error"] == "Missing title or content"
    assert client.get(f"/api/ai_notes/{note_id}", params={"user_id": "user-1"}).json()["title"] == "Groceries"


def test_user_id_is_required(client):
    resp = client.get("/api/ai_notes")

    assert resp.status_code == 400
    assert resp.json() == {"error": "Missing user_id", "code": "VALIDATION_ERROR", "message": "user_id is required"}


def test_get_note(client):
    note_id = create(client).json()["id"]

    resp = client.get(f"/api/ai_notes/{note_id}", params={"user_id": "user-1"})

    assert resp.status_code == 200
    assert resp.json()["title"] == "Groceries"
    assert client.get(f"/api/ai_notes/{note_id}", params={"user_id": "user-2"}).status_code == 404


def test_update_note(client):
    note_id = create(client).json()["id"]

    resp = client.put(
        f"/api/ai_notes/{note_id}",
        params={"user_id": "user-1"},
        json={"title": "Groceries v2", "content": "Milk, eggs, bread"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Groceries v2"
    assert data["updated_at"] is not None


def test_update_note_owned_by_someone_else(client):
    note_id = create(client).json()["id"]

    resp = client.put(
        f"/api/ai_notes/{note_id}",
        params={"user_id": "intruder"},
        json={"title": "Mine now", "content": "Gotcha"},
    )

    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"


def test_delete_note(client, db):
    note_id = create(client).json()["id"]

    resp = client.delete(f"/api/ai_notes/{note_id}", params={"user_id": "user-1"})

    assert resp.status_code == 204
    assert db.tables["ai_notes"] == []


def test_delete_note_owned_by_someone_else_is_not_found(client, db):
    note_id = create(client).json()["id"]

    resp = client.delete(f"/api/ai_notes/{note_id}", params={"user_id": "intruder"})

    assert resp.status_code == 404
    assert resp.json()["code"] == "NOT_FOUND"
    assert len(db.tables["ai_notes"]) == 1


def test_unsupported_method(client):
    resp = client.patch("/api/ai_notes/abc", params={"user_id": "user-1"})

    assert resp.status_code == 405
    assert resp.json()["message"] == "PATCH is not supported for this endpoint"
