import uuid

from app.db.models.lead import Lead
from app.db.models.masterclass import Masterclass


def test_list_only_active_masterclasses_in_date_order(client, make_masterclass):
    make_masterclass(title="Later", days_ahead=10)
    make_masterclass(title="Sooner", days_ahead=1)
    make_masterclass(title="Hidden", days_ahead=2, is_active=False)

    resp = client.get("/api/masterclasses")

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert [m["title"] for m in body["data"]] == ["Sooner", "Later"]


def test_register_for_masterclass(client, make_lead, make_masterclass, session_factory):
    lead_id = make_lead()
    masterclass_id = make_masterclass()

    resp = client.post(
        "/api/masterclasses",
        json={"leadId": str(lead_id), "masterclassId": str(masterclass_id)},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["lead_id"] == str(lead_id)
    assert data["masterclass_id"] == str(masterclass_id)

    with session_factory() as db:
        assert db.get(Masterclass, masterclass_id).current_attendees == 1
        assert db.get(Lead, lead_id).conversion_stage == "Warm"


def test_duplicate_registration_conflicts(client, make_lead, make_masterclass, session_factory):
    body = {"leadId": str(make_lead()), "masterclassId": str(make_masterclass())}

    assert client.post("/api/masterclasses", json=body).status_code == 200
    resp = client.post("/api/masterclasses", json=body)

    assert resp.status_code == 409
    assert resp.json() == {"error": "Already registered for this masterclass"}
    with session_factory() as db:
        assert db.get(Masterclass, uuid.UUID(body["masterclassId"])).current_attendees == 1


def test_register_missing_fields(client):
    resp = client.post("/api/masterclasses", json={"leadId": str(uuid.uuid4())})

    assert resp.status_code == 400
    assert resp.json()["missing"] == ["masterclassId"]


def test_register_unknown_lead(client, make_masterclass):
    resp = client.post(
        "/api/masterclasses",
        json={"leadId": str(uuid.uuid4()), "masterclassId": str(make_masterclass())},
    )
    assert resp.status_code == 404


def test_register_unknown_masterclass(client, make_lead):
    resp = client.post(
        "/api/masterclasses",
        json={"leadId": str(make_lead()), "masterclassId": str(uuid.uuid4())},
    )
    assert resp.status_code == 404
    assert resp.json() == {"error": "Masterclass not found"}


def test_register_invalid_id(client):
    resp = client.post("/api/masterclasses", json={"leadId": "abc", "masterclassId": "def"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid leadId"}
