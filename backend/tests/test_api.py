# tests/test_api.py

from conftest import make_publication, make_response


PUBLICATIONS = [
    make_publication("Deep Learning for Graph Neural Networks", cited_by=10),
    make_publication("Sparse Coding Revisited", cited_by=300),
    make_publication("Another Title", cited_by=None),
]


def test_health_endpoints(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}

    r = client.get("/api/authors/health")
    assert r.status_code == 200
    assert "running" in r.text


def test_search_returns_wire_shaped_publications(client, fake_client):
    fake_client.response = make_response(PUBLICATIONS)

    r = client.get("/api/authors/search", params={"name": "Andrew Ng"})

    assert r.status_code == 200
    data = r.json()
    assert [p["title"] for p in data] == [p.title for p in PUBLICATIONS]
    assert data[0]["publication_info"]["authors"][0]["author_id"] == "mG4imMEAAAAJ"
    assert fake_client.calls == [{"q": 'author:"Andrew Ng"'}]


def test_paginated_search_defaults(client, fake_client):
    r = client.get("/api/authors/search/paginated", params={"name": "Ng"})

    assert r.status_code == 200
    assert fake_client.calls[0]["start"] == "0"
    assert fake_client.calls[0]["num"] == "10"


def test_paginated_search_rejects_page_size_with_400(client, fake_client):
    r = client.get("/api/authors/search/paginated", params={"name": "Ng", "num": 25})

    assert r.status_code == 400
    assert r.json()["error"] == "invalid_argument"
    assert fake_client.calls == []


def test_date_range_search_uses_camel_case_params(client, fake_client):
    r = client.get("/api/authors/search/date-range", params={"name": "Ng", "yearTo": 2020})

    assert r.status_code == 200
    assert fake_client.calls[0] == {"q": 'author:"Ng"', "as_yhi": "2020"}


def test_upstream_error_maps_to_502(client, fake_client):
    fake_client.response = make_response(None, error="rate limited")

    r = client.get("/api/authors/search", params={"name": "Ng"})

    assert r.status_code == 502
    body = r.json()
    assert body["error"] == "upstream"
    assert "rate limited" in body["message"]
    assert body["upstream_status"] == 500


def test_missing_name_is_validation_error(client):
    r = client.get("/api/authors/search")
    assert r.status_code == 422


def test_save_then_read_back(client, fake_client):
    fake_client.response = make_response(PUBLICATIONS)

    r = client.post("/api/database/save", params={"name": "Andrew Ng", "maxArticles": 2})
    assert r.status_code == 200
    assert r.json() == {
        "message": "Data saved successfully",
        "researcher_name": "Andrew Ng",
        "articles_saved": 2,
        "articles_found": 3,
    }

    r = client.get("/api/database/stats")
    assert r.json() == {"total_researchers": 1, "total_articles": 2}

    researchers = client.get("/api/database/researchers").json()
    assert len(researchers) == 1
    researcher_id = researchers[0]["id"]
    assert researchers[0]["author_id"] == "mG4imMEAAAAJ"

    r = client.get(f"/api/database/researchers/{researcher_id}")
    assert r.status_code == 200
    assert r.json()["name"] == "Andrew Ng"

    articles = client.get("/api/database/articles").json()
    assert [a["title"] for a in articles] == ["Sparse Coding Revisited", "Deep Learning for Graph Neural Networks"]
    assert all(a["researcher_name"] == "Andrew Ng" for a in articles)
    assert articles[1]["keywords"] == "deep, learning, graph, neural, networks"
    assert articles[1]["publication_date"] == "2023"

    r = client.get(f"/api/database/articles/{articles[0]['id']}")
    assert r.status_code == 200
    assert r.json()["cited_by"] == 300

    by_researcher = client.get(f"/api/database/articles/researcher/{researcher_id}").json()
    assert len(by_researcher) == 2


def test_save_twice_does_not_duplicate(client, fake_client):
    fake_client.response = make_response(PUBLICATIONS)

    client.post("/api/database/save", params={"name": "Andrew Ng", "maxArticles": 3})
    client.post("/api/database/save", params={"name": "Andrew Ng", "maxArticles": 3})

    assert client.get("/api/database/stats").json() == {"total_researchers": 1, "total_articles": 3}


def test_save_rejects_non_positive_max_articles(client, fake_client):
    r = client.post("/api/database/save", params={"name": "Ng", "maxArticles": 0})
    assert r.status_code == 422
    assert fake_client.calls == []


def test_save_persistence_failure_maps_to_500(client, fake_client):
    fake_client.response = make_response([make_publication(None)])

    r = client.post("/api/database/save", params={"name": "Andrew Ng"})

    assert r.status_code == 500
    assert r.json()["error"] == "persistence"
    # request transaction rolled back by the session dependency
    assert client.get("/api/database/stats").json() == {"total_researchers": 0, "total_articles": 0}


def test_unknown_ids_return_404(client):
    assert client.get("/api/database/researchers/999").status_code == 404
    assert client.get("/api/database/articles/999").status_code == 404
    assert client.get("/api/database/articles/researcher/999").status_code == 404


def test_clear_deletes_everything(client, fake_client):
    fake_client.response = make_response(PUBLICATIONS)
    client.post("/api/database/save", params={"name": "Andrew Ng", "maxArticles": 3})

    r = client.delete("/api/database/clear")

    assert r.status_code == 200
    assert r.json() == {
        "message": "Database cleared successfully",
        "deleted_articles": 3,
        "deleted_researchers": 1,
    }
    assert client.get("/api/database/stats").json() == {"total_researchers": 0, "total_articles": 0}


def test_article_without_researcher_is_404_and_left_out_of_listing(client, fake_client, session_factory):
    from scientometrics.database.db.models import ArticleRow
    from scientometrics.model.researcher import utcnow

    fake_client.response = make_response(PUBLICATIONS[:1])
    client.post("/api/database/save", params={"name": "Andrew Ng", "maxArticles": 1})

    # sqlite does not enforce the foreign key unless asked to
    db = session_factory()
    orphan = ArticleRow(researcher_id=999, title="Orphaned Paper", cited_by=0, created_at=utcnow())
    db.add(orphan)
    db.commit()
    orphan_id = orphan.id
    db.close()

    r = client.get(f"/api/database/articles/{orphan_id}")
    assert r.status_code == 404

    r = client.get("/api/database/articles")
    assert r.status_code == 200
    assert [a["title"] for a in r.json()] == ["Deep Learning for Graph Neural Networks"]
