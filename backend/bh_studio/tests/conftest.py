from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"


def make_completion(content=None, image_url=None, error=None, with_choices=True, finish_reason="stop"):
    """Build a chat completion shaped like the gateway's, including the `images` extra field."""
    mock_message = MagicMock()
    mock_message.content = content
    mock_message.images = [{"type": "image_url", "image_url": {"url": image_url}}] if image_url else None

    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_choice.finish_reason = finish_reason
    mock_choice.native_finish_reason = None

    mock_response = MagicMock()
    mock_response.choices = [mock_choice] if with_choices else []
    mock_response.error = error
    return mock_response


def make_status_error(status_code: int, message: str = "upstream error") -> openai.APIStatusError:
    response = httpx.Response(status_code, request=httpx.Request("POST", GATEWAY_URL))
    if status_code == 429:
        return openai.RateLimitError(message, response=response, body=None)
    return openai.APIStatusError(message, response=response, body=None)


@pytest.fixture
def completion():
    return make_completion


@pytest.fixture
def status_error():
    return make_status_error


@pytest.fixture
def mock_completions():
    """Patch the gateway's AsyncOpenAI client; tests configure `create`."""
    mock_completions = MagicMock()
    mock_completions.create = AsyncMock()

    mock_chat = MagicMock()
    mock_chat.completions = mock_completions

    mock_client_instance = AsyncMock()
    mock_client_instance.chat = mock_chat

    with patch("bh_studio.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance):
        with patch("bh_studio.agent.llm_client.settings.AI_GATEWAY_API_KEY", "dummy_key"):
            yield mock_completions
