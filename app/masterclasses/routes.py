# Masterclass listing and registration
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.deps import get_db, get_json_body
from app.db.models.lead import Lead
from app.db.models.masterclass import Masterclass, MasterclassRegistration
from app.errors import ConflictError, NotFoundError
from app.validators import parse_uuid, require_keys

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/masterclasses")


@router.get("")
def list_masterclasses(db: Session = Depends(get_db)):
    items = (
        db.query(Masterclass)
        .filter(Masterclass.is_active.is_(True))
        .order_by(Masterclass.scheduled_date.asc())
        .all()
    )
    return {"success": True, "data": [m.to_dict() for m in items]}


@router.post("")
def register_for_masterclass(
    body: dict = Depends(get_json_body),
    db: Session = Depends(get_db),
):
    require_keys(body, "leadId", "masterclassId")
    lead_id = parse_uuid(body["leadId"], "leadId")
    masterclass_id = parse_uuid(body["masterclassId"], "masterclassId")

    lead = db.query(Lead).filter(Lead.id == lead_id).first()
    if not lead:
        raise NotFoundError("Lead not found")

    masterclass = (
        db.query(Masterclass)
        .filter(Masterclass.id == masterclass_id, Masterclass.is_active.is_(True))
        .first()
    )
    if not masterclass:
        raise NotFoundError("Masterclass not found")

    registration = MasterclassRegistration(lead_id=lead.id, masterclass_id=masterclass.id)
    db.add(registration)
    try:
        db.flush()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Already registered for this masterclass") from e

    # Atomic increment
    (
        db.query(Masterclass)
        .filter(Masterclass.id == masterclass.id)
        .update(
            {Masterclass.current_attendees: Masterclass.current_attendees + 1},
            synchronize_session=False,
        )
    )
    lead.conversion_stage = "Warm"
    db.commit()
    logger.info("Lead %s registered for masterclass %s", lead.id, masterclass.id)

    return {"success": True, "data": registration.to_dict()}
