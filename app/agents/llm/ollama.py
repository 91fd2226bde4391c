import logging

import httpx

from app.errors import InvalidLLMResponseError, LLMUnavailableError
from app.agents.llm.base import LLMClient, build_messages

logger = logging.getLogger(__name__)

class OllamaOpenAIClient(LLMClient):
    def __init__(self, base_url: str, model: str, timeout: float = 120.0,
    transport: httpx.BaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.transport = transport

    def generate_text(self, * , system: str | None, user: str,
    temperature: float = 0.7, max_tokens: int | None = None) -> str:
        # Ollama OpenAI-compatible endpoint
        # POST {base_url}/chat/completions with OpenAI message format

        url = f"{self.base_url}/chat/completions"
        payload = {
            "model": self.model,
            "messages": build_messages(system, user),
            "temperature": temperature
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        headers = {
            "Content-Type": "application/json",
            #OpenAI-compatible clients require an api key field; Ollama ignores it
            "Authorization": "Bearer ollama",
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                r = client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPStatusError as e:
            logger.error("Ollama API error %s: %s", e.response.status_code, e.response.text)
            raise LLMUnavailableError(detail=e.response.text) from e
        except httpx.HTTPError as e:
            logger.error("Ollama API request failed: %s", e)
            raise LLMUnavailableError(detail=str(e)) from e
        except ValueError as e:
            raise InvalidLLMResponseError() from e

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            content = None
        if not content:
            raise InvalidLLMResponseError()
        return content
