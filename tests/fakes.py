from app.agents.llm.base import LLMClient


class FakeLLM(LLMClient):
    """Returns queued responses in order, or raises ``error`` on every call."""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def generate_text(self, *, system, user, temperature=0.7, max_tokens=None):
        self.calls.append(
            {"system": system, "user": user, "temperature": temperature, "max_tokens": max_tokens}
        )
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)
