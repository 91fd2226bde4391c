import uuid

from app.db.models.course_enrollment import CourseEnrollment
from app.db.models.lead import Lead


def test_enroll(client, make_lead, session_factory):
    lead_id = make_lead(career_goals="Become an ML engineer")

    resp = client.post(
        "/api/courses/enroll",
        json={"courseId": "course_1", "leadId": str(lead_id), "paymentAmount": 299},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Successfully enrolled in course!"
    assert body["enrollment"]["course_id"] == "course_1"
    assert body["enrollment"]["payment_amount"] == 299
    assert body["enrollment"]["enrollment_status"] == "enrolled"

    with session_factory() as db:
        lead = db.get(Lead, lead_id)
        assert lead.career_goals == "Become an ML engineer | Enrolled in Course: course_1"


def test_enroll_without_payment(client, make_lead):
    resp = client.post(
        "/api/courses/enroll", json={"courseId": "course_2", "leadId": str(make_lead())}
    )

    assert resp.status_code == 200
    assert resp.json()["enrollment"]["payment_amount"] is None


def test_enroll_twice_conflicts(client, make_lead, session_factory):
    body = {"courseId": "course_1", "leadId": str(make_lead())}

    assert client.post("/api/courses/enroll", json=body).status_code == 200
    resp = client.post("/api/courses/enroll", json=body)

    assert resp.status_code == 409
    payload = resp.json()
    assert payload["error"] == "Already enrolled"
    assert payload["message"] == "You are already enrolled in this course!"
    assert payload["enrollment"]["enrollment_status"] == "enrolled"
    with session_factory() as db:
        assert db.query(CourseEnrollment).count() == 1


def test_enroll_unknown_lead(client):
    resp = client.post(
        "/api/courses/enroll", json={"courseId": "course_1", "leadId": str(uuid.uuid4())}
    )

    assert resp.status_code == 404
    assert resp.json() == {"error": "Lead not found"}


def test_enroll_missing_fields(client):
    resp = client.post("/api/courses/enroll", json={"courseId": "course_1"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Course ID and Lead ID are required"


def test_enroll_rejects_non_numeric_payment(client, make_lead):
    resp = client.post(
        "/api/courses/enroll",
        json={"courseId": "course_1", "leadId": str(make_lead()), "paymentAmount": "lots"},
    )
    assert resp.status_code == 400


def test_healthz(client):
    assert client.get("/healthz").json() == {"status": "ok"}
