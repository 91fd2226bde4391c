# Lead capture
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.deps import get_db, get_json_body, get_llm, require_llm
from app.agents.llm.base import LLMClient
from app.agents.career_planner import generate_career_roadmap, recommended_titles
from app.db.models.lead import Lead
from app.errors import LLMServiceError
from app.leads.schemas import normalize_profile, require_fields

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leads")


@router.post("")
def create_lead(
    body: dict = Depends(get_json_body),
    db: Session = Depends(get_db),
    llm: LLMClient | None = Depends(get_llm),
):
    profile = normalize_profile(body)
    require_fields(profile, "name", "email", "current_role", "career_goals")

    email_norm = profile.email.lower()
    lead = db.query(Lead).filter(Lead.email == email_norm).first()
    if lead is None:
        lead = Lead(email=email_norm)
        db.add(lead)

    lead.name = profile.name
    lead.job_role = profile.current_role
    lead.experience_level = profile.experience_level
    lead.career_goals = profile.career_goals
    lead.preferred_tech_stack = profile.preferred_tech_stack
    db.commit()
    logger.info("Saved lead %s", lead.id)

    try:
        assessment = generate_career_roadmap(require_llm(llm), profile)
    except LLMServiceError as e:
        # The lead is already stored; report the assessment failure softly
        logger.warning("AI assessment failed for lead %s: %s", lead.id, e)
        return {
            "success": True,
            "data": {"lead": lead.to_dict(), "assessment": None},
            "warning": "Lead saved but AI assessment failed",
        }

    lead.ai_career_roadmap = assessment
    lead.recommended_masterclasses = recommended_titles(assessment)
    db.commit()

    return {
        "success": True,
        "data": {"lead": lead.to_dict(), "assessment": assessment},
    }
