import logging

from app.settings import Settings
from app.agents.llm.base import LLMClient
from app.agents.llm.ollama import OllamaOpenAIClient
from app.agents.llm.groq import GroqOpenAIClient

logger = logging.getLogger(__name__)

def build_llm_client(settings: Settings) -> LLMClient | None:
    """Returns None when the Groq provider is selected without an API key."""
    if settings.LLM_PROVIDER == "groq":
        if not settings.GROQ_API_KEY:
            logger.error("GROQ_API_KEY not configured")
            return None
        return GroqOpenAIClient(
            api_key=settings.GROQ_API_KEY,
            base_url=settings.GROQ_BASE_URL,
            model=settings.GROQ_MODEL,
            timeout=settings.LLM_TIMEOUT_SECONDS,
        )

    return OllamaOpenAIClient(
        base_url = settings.ollama_base_url,
        model = settings.ollama_model,
        timeout = settings.LLM_TIMEOUT_SECONDS,
    )
