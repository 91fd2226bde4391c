from datetime import date, timedelta

from app.agents.interpreter import interpret
from app.agents.llm.base import LLMClient
from app.agents.schemas import BookingSlot

BOOKING_TEMPERATURE = 0.3
BOOKING_MAX_TOKENS = 500

# (days ahead, time, label)
DEFAULT_SLOTS = [
    (1, "10:00", "Morning Consultation"),
    (2, "14:00", "Afternoon Strategy Session"),
    (3, "11:00", "Business Planning Session"),
    (4, "15:00", "Growth Strategy Meeting"),
    (5, "09:00", "Early Planning Session"),
]


def build_booking_system_prompt(timezone: str) -> str:
    return (
        "You are a scheduling assistant. Generate 5 suggested booking time slots "
        f"for the next 7 days in {timezone} timezone. Return a JSON array of objects "
        'with "date", "time", and "label" fields. Format dates as YYYY-MM-DD and '
        "times as HH:MM."
    )


BOOKING_USER_PROMPT = (
    "Generate 5 suggested booking slots for business consultations, considering "
    "typical business hours (9 AM - 6 PM) and avoiding weekends for professional meetings."
)


def fallback_booking_slots(today: date) -> list[dict]:
    return [
        BookingSlot(
            date=(today + timedelta(days=days)).isoformat(),
            time=time,
            label=label,
        ).model_dump()
        for days, time, label in DEFAULT_SLOTS
    ]


def suggest_booking_slots(llm: LLMClient, timezone: str, today: date) -> list:
    raw_text = llm.generate_text(
        system=build_booking_system_prompt(timezone),
        user=BOOKING_USER_PROMPT,
        temperature=BOOKING_TEMPERATURE,
        max_tokens=BOOKING_MAX_TOKENS,
    )
    return interpret(raw_text, lambda: fallback_booking_slots(today), expect=list)
