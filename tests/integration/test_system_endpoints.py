import re
import uuid

VIRTUAL = {"virtualLocation": "https://cloud.example.com"}
ATHENS = {"geoLocation": {"latitude": 37.98, "longitude": 23.72}}


def _payload(name="System1", **overrides):
    body = {
        "name": name,
        "description": "Edge gateway",
        "location": ATHENS,
        "organization": "Org",
        "additionalInformation": ["rack-4", {"tier": 2}],
    }
    body.update(overrides)
    return body


def test_system_create_with_coordinates(client):
    r = client.post("/system", json=_payload())
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["location"]["geoLocation"] == {"latitude": 37.98, "longitude": 23.72}
    assert body["location"]["virtualLocation"] is None
    assert body["organization"] == "Org"
    assert body["additionalInformation"] == ["rack-4", {"tier": 2}]

    fetched = client.get(f"/system/{body['id']}").json()
    assert fetched == body


def test_system_zero_latitude_is_rejected(client):
    location = {"geoLocation": {"latitude": 0, "longitude": 22.8}, "virtualLocation": ""}
    r = client.post("/system", json=_payload(location=location))
    assert r.status_code == 400
    assert r.json()["messageKey"] == "INVALID_LOCATION_STRUCTURE"
    assert client.get("/system").status_code == 404


def test_system_both_locations_rejected(client):
    r = client.post("/system", json=_payload(location={**ATHENS, **VIRTUAL}))
    assert r.status_code == 400
    assert r.json()["messageKey"] == "INVALID_LOCATION_STRUCTURE"


def test_system_half_coordinates_with_virtual_location_rejected(client):
    location = {"geoLocation": {"latitude": 10.5}, **VIRTUAL}
    r = client.post("/system", json=_payload(location=location))
    assert r.status_code == 400
    assert r.json()["messageKey"] == "INVALID_LOCATION_STRUCTURE"
    assert client.get("/system").status_code == 404


def test_system_requires_description(client):
    r = client.post("/system", json=_payload(description=" "))
    assert r.status_code == 400
    body = r.json()
    assert body["messageKey"] == "MANDATORY_FIELDS_MISSING"
    assert "description" in body["message"]


def test_system_switch_to_virtual_location(client):
    created = client.post("/system", json=_payload()).json()
    r = client.put(f"/system/{created['id']}", json=_payload(location=VIRTUAL))
    assert r.status_code == 200
    body = r.json()
    assert body["location"] == {"geoLocation": None, "virtualLocation": "https://cloud.example.com"}
    assert body["creationDate"] == created["creationDate"]


def test_system_duplicate_and_delete(client):
    created = client.post("/system", json=_payload()).json()
    r = client.post("/system", json=_payload(location=VIRTUAL))
    assert r.status_code == 409
    assert r.json()["messageKey"] == "DUPLICATE_SYSTEM"

    r = client.delete(f"/system/{created['id']}")
    assert r.status_code == 200
    assert r.json()["name"] == "System1"

    r = client.delete(f"/system/{created['id']}")
    assert r.status_code == 404
    assert r.json()["messageKey"] == "SYSTEM_NOT_FOUND_ID"


def test_system_without_location_is_accepted(client):
    body = _payload()
    del body["location"]
    r = client.post("/system", json=body)
    assert r.status_code == 201
    assert r.json()["location"] is None


def test_system_delete_all(client):
    client.post("/system", json=_payload("S1"))
    client.post("/system", json=_payload("S2", location=VIRTUAL))
    assert client.delete("/system").status_code == 204
    r = client.delete("/system")
    assert r.status_code == 404
    assert r.json()["messageKey"] == "NO_SYSTEMS_FOUND"
    assert client.get(f"/system/{uuid.uuid4()}").status_code == 404


def test_system_timestamps_use_millisecond_format(client):
    body = client.post("/system", json=_payload()).json()
    pattern = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}")
    assert pattern.fullmatch(body["creationDate"])
    assert pattern.fullmatch(body["latestUpdateDate"])
