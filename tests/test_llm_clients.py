import json

import httpx
import pytest

from app.agents.llm.client import build_llm_client
from app.agents.llm.groq import GroqOpenAIClient
from app.agents.llm.ollama import OllamaOpenAIClient
from app.errors import InvalidLLMResponseError, LLMUnavailableError
from app.settings import Settings


def completion(content):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "llama3-70b-8192",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class Recorder:
    def __init__(self, response):
        self.response = response
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def groq_client(handler):
    return GroqOpenAIClient(
        api_key="gsk-test",
        base_url="https://api.groq.test/openai/v1",
        model="llama3-70b-8192",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )


def test_groq_sends_bearer_token_and_parameters():
    recorder = Recorder(httpx.Response(200, json=completion("  hello  ")))
    client = groq_client(recorder)

    text = client.generate_text(system="sys", user="usr", temperature=0.7, max_tokens=1500)

    assert text == "hello"
    request = recorder.requests[0]
    assert request.url == "https://api.groq.test/openai/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer gsk-test"
    body = json.loads(request.content)
    assert body["model"] == "llama3-70b-8192"
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 1500
    assert body["messages"] == [
        {"role": "system", "content": "sys"},
        {"role": "user", "content": "usr"},
    ]


def test_groq_user_only_prompt():
    recorder = Recorder(httpx.Response(200, json=completion("ok")))
    groq_client(recorder).generate_text(system=None, user="usr")

    body = json.loads(recorder.requests[0].content)
    assert body["messages"] == [{"role": "user", "content": "usr"}]
    assert "max_tokens" not in body


def test_groq_error_status_is_not_retried():
    recorder = Recorder(httpx.Response(500, json={"error": {"message": "boom"}}))

    with pytest.raises(LLMUnavailableError):
        groq_client(recorder).generate_text(system="s", user="u")
    assert len(recorder.requests) == 1


def test_groq_connection_error():
    recorder = Recorder(httpx.ConnectError("refused"))

    with pytest.raises(LLMUnavailableError):
        groq_client(recorder).generate_text(system="s", user="u")


def test_groq_empty_content():
    recorder = Recorder(httpx.Response(200, json=completion("")))

    with pytest.raises(InvalidLLMResponseError):
        groq_client(recorder).generate_text(system="s", user="u")


def ollama_client(handler):
    return OllamaOpenAIClient(
        base_url="http://ollama.test/v1/",
        model="llama3.1",
        transport=httpx.MockTransport(handler),
    )


def test_ollama_posts_openai_payload():
    recorder = Recorder(httpx.Response(200, json=completion('{"a": 1}')))

    text = ollama_client(recorder).generate_text(system="s", user="u", temperature=0.3, max_tokens=500)

    assert text == '{"a": 1}'
    request = recorder.requests[0]
    assert request.url == "http://ollama.test/v1/chat/completions"
    body = json.loads(request.content)
    assert body["model"] == "llama3.1"
    assert body["temperature"] == 0.3
    assert body["max_tokens"] == 500


def test_ollama_error_status():
    recorder = Recorder(httpx.Response(502, text="bad gateway"))

    with pytest.raises(LLMUnavailableError) as excinfo:
        ollama_client(recorder).generate_text(system="s", user="u")
    assert excinfo.value.detail == "bad gateway"


def test_ollama_timeout():
    recorder = Recorder(httpx.ReadTimeout("slow"))

    with pytest.raises(LLMUnavailableError):
        ollama_client(recorder).generate_text(system="s", user="u")


@pytest.mark.parametrize("payload", [{"choices": []}, {"choices": [{"message": {"content": None}}]}, {}])
def test_ollama_missing_content(payload):
    recorder = Recorder(httpx.Response(200, json=payload))

    with pytest.raises(InvalidLLMResponseError):
        ollama_client(recorder).generate_text(system="s", user="u")


def test_build_client_without_groq_key_is_none():
    settings = Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY=None)
    assert build_llm_client(settings) is None


def test_build_groq_client():
    settings = Settings(_env_file=None, LLM_PROVIDER="groq", GROQ_API_KEY="gsk-test")
    client = build_llm_client(settings)
    assert isinstance(client, GroqOpenAIClient)
    assert client.model == "llama3-70b-8192"
    client.close()


def test_build_ollama_client():
    settings = Settings(_env_file=None, LLM_PROVIDER="ollama", GROQ_API_KEY=None)
    assert isinstance(build_llm_client(settings), OllamaOpenAIClient)
