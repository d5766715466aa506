"""API integration tests."""
from app.backend.db.models import Event


def test_root_and_health(client):
    """Test service endpoints."""
    assert client.get("/").json()["message"] == "Code Meet Hub API"
    assert client.get("/health").json() == {"status": "healthy"}


def test_create_event(client, signed_in, sample_event_data):
    """Test inserting an event."""
    user_id, headers = signed_in
    payload = {**sample_event_data, "owner_id": user_id}

    response = client.post("/api/events", json=payload, headers=headers)
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == sample_event_data["title"]
    assert data["owner_id"] == user_id
    assert data["tags"] == ["React", "Frontend"]
    assert "id" in data


def test_create_event_requires_token(client, sample_event_data):
    """Test that inserting without a session is rejected."""
    response = client.post("/api/events", json=sample_event_data)
    assert response.status_code == 401
    assert response.json()["detail"]["code"] == "PGRST301"


def test_create_event_with_unknown_token(client, sample_event_data):
    """Test that an unknown bearer token is rejected."""
    response = client.post(
        "/api/events", json=sample_event_data, headers={"Authorization": "Bearer nope"}
    )
    assert response.status_code == 401


def test_create_event_for_other_owner(client, signed_in, sample_event_data):
    """Test that a user cannot insert rows owned by someone else."""
    _, headers = signed_in
    payload = {**sample_event_data, "owner_id": "someone-else"}

    response = client.post("/api/events", json=payload, headers=headers)
    assert response.status_code == 403
    assert response.json()["detail"]["code"] == "42501"


def test_duplicate_event_returns_unique_violation(client, db_session, signed_in, sample_event_data):
    """Test the uniqueness constraint on title, date and location."""
    user_id, headers = signed_in
    payload = {**sample_event_data, "owner_id": user_id}

    assert client.post("/api/events", json=payload, headers=headers).status_code == 201
    response = client.post("/api/events", json=payload, headers=headers)

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "23505"
    assert db_session.query(Event).count() == 1


def test_missing_title_returns_not_null_violation(client, signed_in, sample_event_data):
    """Test that a missing required column surfaces as 23502."""
    user_id, headers = signed_in
    payload = {**sample_event_data, "owner_id": user_id}
    del payload["title"]

    response = client.post("/api/events", json=payload, headers=headers)
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "23502"


def test_list_events_ordered_by_date(client, signed_in, sample_event_data):
    """Test that the feed is sorted ascending by date."""
    user_id, headers = signed_in
    for title, when in [
        ("Late", "2031-01-01T10:00:00+00:00"),
        ("Early", "2030-01-01T10:00:00+00:00"),
        ("Middle", "2030-06-01T10:00:00+00:00"),
    ]:
        payload = {**sample_event_data, "title": title, "date": when, "owner_id": user_id}
        assert client.post("/api/events", json=payload, headers=headers).status_code == 201

    response = client.get("/api/events")
    assert response.status_code == 200
    assert [e["title"] for e in response.json()] == ["Early", "Middle", "Late"]


def test_list_events_empty(client):
    """Test listing with no events."""
    response = client.get("/api/events")
    assert response.status_code == 200
    assert response.json() == []


def test_date_is_stored_in_utc(client, signed_in, sample_event_data):
    """Test that offsets are normalized before storage."""
    user_id, headers = signed_in
    payload = {**sample_event_data, "date": "2030-06-01T19:00:00-03:00", "owner_id": user_id}

    created = client.post("/api/events", json=payload, headers=headers).json()
    assert created["date"].startswith("2030-06-01T22:00:00")


def test_get_event(client, signed_in, sample_event_data):
    """Test fetching one event and a missing one."""
    user_id, headers = signed_in
    created = client.post(
        "/api/events", json={**sample_event_data, "owner_id": user_id}, headers=headers
    ).json()

    assert client.get(f"/api/events/{created['id']}").json()["title"] == sample_event_data["title"]

    missing = client.get("/api/events/does-not-exist")
    assert missing.status_code == 404
    assert missing.json()["detail"]["code"] == "PGRST116"


def test_error_body_documented_in_openapi(client):
    """Test that the structured error body is published for failing routes."""
    schema = client.get("/openapi.json").json()

    assert {"ApiError", "ErrorResponse"} <= set(schema["components"]["schemas"])
    insert_responses = schema["paths"]["/api/events"]["post"]["responses"]
    for status_code in ("400", "401", "403", "409"):
        ref = insert_responses[status_code]["content"]["application/json"]["schema"]["$ref"]
        assert ref == "#/components/schemas/ErrorResponse"
    assert "404" in schema["paths"]["/api/events/{event_id}"]["get"]["responses"]
