"""
End-to-end tests for reading and creating batches of authors.
"""

import uuid


def test_create_collection_location_reads_back(client, author_payload):
    batch = [
        {**author_payload, "firstName": "Ann"},
        {**author_payload, "firstName": "Bob"},
    ]

    response = client.post("/authorcollections", json=batch)

    assert response.status_code == 201
    created = response.json()
    ids = [author["id"] for author in created]
    location = response.headers["location"]
    assert location.endswith(f"/authorcollections/({','.join(ids)})")

    fetched = client.get(location)
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_read_collection_in_request_order(client, create_author):
    first = create_author(firstName="Ann")
    second = create_author(firstName="Bob")

    response = client.get(f"/authorcollections/({second},{first})")

    assert response.status_code == 200
    assert [author["id"] for author in response.json()] == [second, first]


def test_read_collection_through_authors_path(client, create_author):
    first = create_author(firstName="Ann")
    second = create_author(firstName="Bob")

    response = client.get(f"/authors/({first},{second})")

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_read_collection_with_unknown_id(client, create_author):
    author_id = create_author()

    response = client.get(f"/authorcollections/({author_id},{uuid.uuid4()})")

    assert response.status_code == 404


def test_read_collection_with_duplicate_ids(client, create_author):
    author_id = create_author()

    response = client.get(f"/authorcollections/({author_id},{author_id})")

    assert response.status_code == 200
    assert len(response.json()) == 1


def test_read_collection_with_malformed_id(client):
    response = client.get(f"/authorcollections/({uuid.uuid4()},nope)")

    assert response.status_code == 400
    assert "ids" in response.json()["errors"]


def test_create_collection_is_all_or_nothing(client, author_payload):
    batch = [author_payload, {**author_payload, "mainCategory": ""}]

    response = client.post("/authorcollections", json=batch)

    assert response.status_code == 422
    assert list(response.json()["errors"]) == ["[1].mainCategory"]
    assert client.get("/authors").json() == []


def test_create_empty_collection(client):
    response = client.post("/authorcollections", json=[])

    assert response.status_code == 422


def test_read_collection_without_ids(client):
    response = client.get("/authorcollections/()")

    assert response.status_code == 400
    assert response.json()["status"] == 400
