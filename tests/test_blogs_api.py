BLOGS = "/api/v1/blogs"


def clean(client, path, keyword):
    return client.request("DELETE", path, content=keyword.encode("utf-8"))


def entry_ids(client, blog_id=None):
    params = {"blog_id": blog_id} if blog_id is not None else {}
    return [entry["id"] for entry in client.get("/api/v1/entries", params=params).json()]


def test_create_blog(client):
    response = client.post(BLOGS, json={"name": "Engineering", "handle": "eng"})

    assert response.status_code == 201
    body = response.json()
    assert body == {"id": body["id"], "name": "Engineering", "handle": "eng"}
    assert response.headers["Location"] == f"{BLOGS}/{body['id']}"
    assert response.headers["X-blogApp-alert"] == "blogApp.blog.created"
    assert response.headers["X-blogApp-params"] == str(body["id"])


def test_create_blog_with_id_is_rejected(client):
    response = client.post(BLOGS, json={"id": 7, "name": "Engineering", "handle": "eng"})

    assert response.status_code == 400
    body = response.json()
    assert body["entityName"] == "blog"
    assert body["errorKey"] == "idexists"
    assert body["message"] == "error.idexists"
    assert response.headers["X-blogApp-error"] == "error.idexists"
    assert client.get(BLOGS).json() == []


def test_create_blog_validates_lengths(client):
    response = client.post(BLOGS, json={"name": "ab", "handle": "e"})
    assert response.status_code == 422


def test_update_blog(client):
    blog_id = client.post(BLOGS, json={"name": "Engineering", "handle": "eng"}).json()["id"]

    response = client.put(BLOGS, json={"id": blog_id, "name": "Platform", "handle": "plat"})

    assert response.status_code == 200
    assert response.json() == {"id": blog_id, "name": "Platform", "handle": "plat"}
    assert response.headers["X-blogApp-alert"] == "blogApp.blog.updated"
    assert client.get(f"{BLOGS}/{blog_id}").json()["name"] == "Platform"


def test_update_blog_without_id(client):
    response = client.put(BLOGS, json={"name": "Platform", "handle": "plat"})
    assert response.status_code == 400
    assert response.json()["errorKey"] == "idnull"


def test_update_missing_blog(client):
    response = client.put(BLOGS, json={"id": 999, "name": "Platform", "handle": "plat"})
    assert response.status_code == 400
    assert response.json()["errorKey"] == "idnotexist"


def test_list_blogs(client, seed):
    seed({1: [(10, "a", "b")], 2: []})

    plain = client.get(BLOGS).json()
    eager = client.get(BLOGS, params={"eager": "true"}).json()

    assert [blog["id"] for blog in plain] == [1, 2]
    assert "entries" not in plain[0]
    assert [entry["id"] for entry in eager[0]["entries"]] == [10]
    assert eager[1]["entries"] == []


def test_get_blog(client, seed):
    seed({1: []})

    assert client.get(f"{BLOGS}/1").json() == {"id": 1, "name": "blog 1", "handle": "b1"}
    assert client.get(f"{BLOGS}/999").status_code == 404


def test_delete_blog_removes_entries(client, seed):
    seed({1: [(10, "a", "b")], 2: [(20, "c", "d")]})

    response = client.delete(f"{BLOGS}/1")

    assert response.status_code == 204
    assert response.headers["X-blogApp-alert"] == "blogApp.blog.deleted"
    assert client.get(f"{BLOGS}/1").status_code == 404
    assert entry_ids(client) == [20]


def test_delete_missing_blog_is_unconditional(client):
    assert client.delete(f"{BLOGS}/999").status_code == 204


def test_clean_one_blog(client, seed):
    seed({1: [(10, "Java Tips", "learn java"), (11, "Go Basics", "learn go")]})

    response = clean(client, f"{BLOGS}/1/clean", "java")

    assert response.status_code == 204
    assert response.content == b""
    assert entry_ids(client) == [11]


def test_clean_one_blog_keeps_other_blogs(client, seed):
    seed({5: [(50, "spam", "x"), (51, "ok", "ok")], 6: [(60, "x", "spam")]})

    assert clean(client, f"{BLOGS}/5/clean", "SPAM").status_code == 204

    assert entry_ids(client, 5) == [51]
    assert entry_ids(client, 6) == [60]


def test_clean_unknown_blog(client, seed):
    seed({1: [(10, "x", "x")]})

    response = clean(client, f"{BLOGS}/999/clean", "x")

    assert response.status_code == 400
    body = response.json()
    assert body["entityName"] == "blog"
    assert body["errorKey"] == "idnotexist"
    assert entry_ids(client) == [10]


def test_clean_all_blogs(client, seed):
    seed({1: [(10, "Hello World", "x"), (11, "y", "y")], 2: [(20, "z", "HELLO there")]})

    response = clean(client, f"{BLOGS}/clean", "hello")

    assert response.status_code == 204
    assert response.headers["X-blogApp-alert"] == "blogApp.blog.deleted"
    assert response.headers["X-blogApp-params"] == "hello"
    assert entry_ids(client) == [11]


def test_clean_all_without_blogs_succeeds(client):
    assert clean(client, f"{BLOGS}/clean", "anything").status_code == 204


def test_clean_all_with_empty_body_removes_everything(client, seed):
    seed({1: [(10, "t1", "c1")], 2: [(20, "t2", "c2")]})

    assert clean(client, f"{BLOGS}/clean", "").status_code == 204

    assert entry_ids(client) == []


def test_clean_keyword_header_is_percent_encoded(client):
    response = clean(client, f"{BLOGS}/clean", "café bar")
    assert response.headers["X-blogApp-params"] == "caf%C3%A9%20bar"


def test_clean_is_audited(client, seed):
    seed({1: [(10, "a", "b")]})
    clean(client, f"{BLOGS}/clean", "Spam")
    clean(client, f"{BLOGS}/1/clean", "Eggs")

    logs = client.get("/api/v1/audit", params={"action": "clean"}).json()

    assert [log["details"] for log in logs] == [
        {"keyword": "eggs", "scope": 1},
        {"keyword": "spam", "scope": "all"},
    ]
    assert logs[0]["object_id"] == 1


def test_failed_clean_is_not_audited(client):
    clean(client, f"{BLOGS}/999/clean", "x")
    assert client.get("/api/v1/audit", params={"action": "clean"}).json() == []


def test_clean_accepts_body_that_is_not_utf8(client, seed):
    seed({1: [(10, "plain", "text")]})

    all_blogs = client.request("DELETE", f"{BLOGS}/clean", content=b"\xff\xfe")
    one_blog = client.request("DELETE", f"{BLOGS}/1/clean", content=b"\xff\xfe")

    assert all_blogs.status_code == 204
    assert one_blog.status_code == 204
    assert entry_ids(client) == [10]
