## Base LLM Client Interface
from abc import ABC, abstractmethod

class LLMClient(ABC):
    @abstractmethod
    def generate_text(self, * , system: str | None, user: str,
    temperature: float = 0.7, max_tokens: int | None = None) -> str:
        """
        Run a single chat completion and return the assistant text.

        Raises LLMUnavailableError on transport failure or a non-2xx response,
        and InvalidLLMResponseError when the completion has no content.
        """
        raise NotImplementedError

    def close(self) -> None:
        pass


def build_messages(system: str | None, user: str) -> list[dict[str, str]]:
    messages = []
    if system is not None:
        messages.append({"role": "system", "content": system})
    messages.append({"role": "user", "content": user})
    return messages
