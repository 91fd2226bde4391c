# app/generation/routes.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.deps import get_json_body, get_llm, require_llm
from app.agents.llm.base import LLMClient
from app.agents.career_planner import generate_career_roadmap
from app.agents.course_architect import generate_custom_course
from app.agents.booking_assistant import suggest_booking_slots
from app.errors import BadRequestError
from app.leads.schemas import normalize_profile, require_fields
from app.validators import require_keys

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/llm")


@router.post("/personalize")
def personalize(
    body: dict = Depends(get_json_body),
    llm: LLMClient | None = Depends(get_llm),
):
    logger.debug("Received personalize request: %s", body)
    profile = normalize_profile(body)

    if not profile.career_goals or not profile.current_role:
        logger.info(
            "Missing fields: name=%s careerGoals=%s currentRole=%s",
            bool(profile.name), bool(profile.career_goals), bool(profile.current_role),
        )
    require_fields(profile, "career_goals", "current_role", received=body)

    roadmap = generate_career_roadmap(require_llm(llm), profile)
    return {"success": True, "data": roadmap}


@router.post("/generate-course")
def generate_course(
    body: dict = Depends(get_json_body),
    llm: LLMClient | None = Depends(get_llm),
):
    require_keys(
        body, "userProfile", "skillGaps", "careerGoals",
        message="User profile, skill gaps, and career goals are required",
    )

    user_profile = body["userProfile"]
    skill_gaps = body["skillGaps"]
    career_goals = body["careerGoals"]
    if not isinstance(user_profile, dict):
        raise BadRequestError("userProfile must be an object")
    if isinstance(skill_gaps, str):
        skill_gaps = [s.strip() for s in skill_gaps.split(",") if s.strip()]
    if not isinstance(skill_gaps, list):
        raise BadRequestError("skillGaps must be a list of strings")

    profile = normalize_profile(user_profile)
    now = datetime.now(timezone.utc)

    course = generate_custom_course(
        require_llm(llm),
        profile,
        [str(s) for s in skill_gaps],
        str(career_goals),
        now,
    )
    return {
        "success": True,
        "customCourse": course,
        "aiGenerated": True,
        "timestamp": now.isoformat(),
    }


@router.post("/bookingsuggest")
def booking_suggest(
    body: dict = Depends(get_json_body),
    llm: LLMClient | None = Depends(get_llm),
):
    tz_name = body.get("timezone") or "UTC"
    if not isinstance(tz_name, str):
        raise BadRequestError("timezone must be a string")

    today = datetime.now(timezone.utc).date()
    slots = suggest_booking_slots(require_llm(llm), tz_name, today)
    return {"success": True, "data": slots}
