# app/agents/interpreter.py
"""
Turn free-text LLM completions into structured JSON values.

Extraction order, first hit wins:
1. content of the first ```json fenced block
2. content of the first generic ``` fenced block
3. first opening bracket to the last closing bracket (greedy, not balanced)

Anything that cannot be extracted or decoded is replaced by the caller's
fallback. Callers never see a parse error.
"""
import json
import logging
import re
from typing import Any, Callable

logger = logging.getLogger(__name__)

_JSON_FENCE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_ANY_FENCE = re.compile(r"```\s*(.*?)\s*```", re.DOTALL)

_BRACKETS = {dict: ("{", "}"), list: ("[", "]")}


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered in a response
    raise ValueError(f"non-standard JSON constant {name}")


def extract_json_candidate(text: str, expect: type = dict) -> str | None:
    """Return the substring most likely to hold the JSON payload, or None."""
    if "```json" in text:
        match = _JSON_FENCE.search(text)
        return match.group(1).strip() if match else None

    if "```" in text:
        match = _ANY_FENCE.search(text)
        return match.group(1).strip() if match else None

    opening, closing = _BRACKETS[expect]
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end < start:
        return None
    return text[start:end + 1].strip()


def interpret(raw: str | None, fallback: Callable[[], Any], *, expect: type = dict) -> Any:
    """
    Decode the structured payload in ``raw``.

    ``fallback`` is called to build the substitute value whenever no candidate
    is found, decoding fails, or the decoded value is not an ``expect``
    instance (``dict`` or ``list``).
    """
    text = raw or ""
    candidate = extract_json_candidate(text, expect)
    if not candidate:
        logger.warning("No JSON found in model output, using fallback. Raw output: %r", text)
        return fallback()

    try:
        value = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.warning("JSON parse error (%s), using fallback. Raw output: %r", e, text)
        return fallback()

    if not isinstance(value, expect):
        logger.warning(
            "Model output decoded to %s, expected %s; using fallback. Raw output: %r",
            type(value).__name__, expect.__name__, text,
        )
        return fallback()

    logger.debug("Parsed model output: %s", candidate)
    return value
