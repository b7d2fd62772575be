ENTRIES = "/api/v1/entries"


def test_create_entry(client, seed):
    seed({1: []})

    response = client.post(
        ENTRIES,
        json={"title": "Java Tips", "content": "learn java", "blog_id": 1},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "Java Tips"
    assert body["blog_id"] == 1
    assert body["date"]
    assert response.headers["Location"] == f"{ENTRIES}/{body['id']}"
    assert response.headers["X-blogApp-alert"] == "blogApp.entry.created"


def test_create_entry_keeps_given_date(client, seed):
    seed({1: []})

    body = client.post(
        ENTRIES,
        json={"title": "t", "content": "c", "blog_id": 1, "date": "2024-01-02T03:04:05+00:00"},
    ).json()

    fetched = client.get(f"{ENTRIES}/{body['id']}").json()
    assert fetched["date"].startswith("2024-01-02T03:04:05")


def test_create_entry_for_missing_blog(client):
    response = client.post(ENTRIES, json={"title": "t", "content": "c", "blog_id": 999})

    assert response.status_code == 400
    assert response.json()["errorKey"] == "blognotexist"
    assert client.get(ENTRIES).json() == []


def test_create_entry_with_id(client, seed):
    seed({1: []})
    response = client.post(ENTRIES, json={"id": 3, "title": "t", "content": "c", "blog_id": 1})
    assert response.status_code == 400
    assert response.json()["errorKey"] == "idexists"


def test_update_entry(client, seed):
    seed({1: [(10, "old", "old")], 2: []})

    response = client.put(
        ENTRIES,
        json={"id": 10, "title": "new", "content": "new body", "blog_id": 2},
    )

    assert response.status_code == 200
    fetched = client.get(f"{ENTRIES}/10").json()
    assert fetched["title"] == "new"
    assert fetched["blog_id"] == 2
    assert fetched["date"].startswith("2025-09-01T10:00:00")


def test_update_entry_errors(client, seed):
    seed({1: []})

    no_id = client.put(ENTRIES, json={"title": "t", "content": "c", "blog_id": 1})
    missing = client.put(ENTRIES, json={"id": 99, "title": "t", "content": "c", "blog_id": 1})
    bad_blog = client.put(ENTRIES, json={"id": 99, "title": "t", "content": "c", "blog_id": 5})

    assert no_id.json()["errorKey"] == "idnull"
    assert missing.json()["errorKey"] == "idnotexist"
    assert bad_blog.json()["errorKey"] == "blognotexist"


def test_list_and_filter_entries(client, seed):
    seed({1: [(10, "a", "a"), (11, "b", "b")], 2: [(20, "c", "c")]})

    assert [e["id"] for e in client.get(ENTRIES).json()] == [10, 11, 20]
    assert [e["id"] for e in client.get(ENTRIES, params={"blog_id": 2}).json()] == [20]


def test_get_missing_entry(client):
    assert client.get(f"{ENTRIES}/1").status_code == 404


def test_delete_entry(client, seed):
    seed({1: [(10, "a", "a")]})

    assert client.delete(f"{ENTRIES}/10").status_code == 204
    assert client.delete(f"{ENTRIES}/10").status_code == 204
    assert client.get(f"{ENTRIES}/10").status_code == 404

    logs = client.get("/api/v1/audit", params={"object_type": "entry"}).json()
    assert [(log["action"], log["object_id"]) for log in logs] == [("delete", 10)]
