# app/courses/routes.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.deps import get_db, get_json_body
from app.db.models.lead import Lead
from app.db.models.course_enrollment import CourseEnrollment
from app.errors import BadRequestError, ConflictError, NotFoundError
from app.validators import parse_uuid, require_keys

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/courses")

ALREADY_ENROLLED_MESSAGE = "You are already enrolled in this course!"


@router.post("/enroll")
def enroll_in_course(
    body: dict = Depends(get_json_body),
    db: Session = Depends(get_db),
):
    require_keys(body, "courseId", "leadId", message="Course ID and Lead ID are required")
    course_id = str(body["courseId"]).strip()
    lead_id = parse_uuid(body["leadId"], "leadId")

    payment_amount = body.get("paymentAmount")
    if payment_amount is not None and (
        isinstance(payment_amount, bool) or not isinstance(payment_amount, (int, float))
    ):
        raise BadRequestError("paymentAmount must be a number")

    lead = db.query(Lead).filter(Lead.id == lead_id).first()
    if not lead:
        raise NotFoundError("Lead not found")

    existing = (
        db.query(CourseEnrollment)
        .filter(CourseEnrollment.lead_id == lead.id, CourseEnrollment.course_id == course_id)
        .first()
    )
    if existing:
        raise ConflictError(
            "Already enrolled",
            message=ALREADY_ENROLLED_MESSAGE,
            enrollment={
                "id": str(existing.id),
                "enrollment_status": existing.enrollment_status,
                "enrolled_at": existing.enrolled_at.isoformat(),
            },
        )

    enrollment = CourseEnrollment(
        lead_id=lead.id,
        course_id=course_id,
        payment_amount=payment_amount,
        enrollment_status="enrolled",
    )
    db.add(enrollment)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Already enrolled", message=ALREADY_ENROLLED_MESSAGE) from e

    lead.career_goals = f"{lead.career_goals} | Enrolled in Course: {course_id}"
    db.commit()
    logger.info("Lead %s enrolled in course %s", lead.id, course_id)

    return {
        "success": True,
        "enrollment": enrollment.to_dict(),
        "message": "Successfully enrolled in course!",
    }
