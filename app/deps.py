## Request-scoped dependencies
import json
from typing import Any, Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from app.agents.llm.base import LLMClient
from app.errors import BadRequestError, LLMNotConfiguredError


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_llm(request: Request) -> LLMClient | None:
    """The process-wide client, or None when no credential is provisioned."""
    return request.app.state.llm


def require_llm(llm: LLMClient | None) -> LLMClient:
    if llm is None:
        raise LLMNotConfiguredError()
    return llm


async def get_json_body(request: Request) -> dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise BadRequestError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise BadRequestError("Request body must be a JSON object")
    return body
