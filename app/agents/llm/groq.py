import logging

import httpx
import openai
from openai import OpenAI

from app.errors import InvalidLLMResponseError, LLMUnavailableError
from .base import LLMClient, build_messages

logger = logging.getLogger(__name__)

class GroqOpenAIClient(LLMClient):
    def __init__(self, * , api_key: str, base_url: str, model: str,
    timeout: float = 120.0, http_client: httpx.Client | None = None):
        # Single attempt per request; the SDK retries twice by default
        self.client = OpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            http_client=http_client,
        )
        self.model = model

    def generate_text(self, *, system: str | None, user: str,
    temperature: float = 0.7, max_tokens: int | None = None) -> str:
        kwargs = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                temperature=temperature,
                messages=build_messages(system, user),
                **kwargs,
            )
        except openai.APIStatusError as e:
            logger.error("Groq API error %s: %s", e.status_code, e.message)
            raise LLMUnavailableError(detail=e.message) from e
        except openai.APIError as e:
            logger.error("Groq API request failed: %s", e)
            raise LLMUnavailableError(detail=str(e)) from e

        if not resp.choices or not resp.choices[0].message.content:
            raise InvalidLLMResponseError()
        return resp.choices[0].message.content.strip()

    def close(self) -> None:
        self.client.close()
