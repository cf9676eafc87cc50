from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from bh_studio.agent.errors import (
    CreditsExhaustedError,
    GatewayError,
    RateLimitError,
    ServiceNotConfiguredError,
)
from bh_studio.agent.llm_client import GatewayClient, image_part, text_part


@pytest.mark.asyncio
async def test_generate_text_sends_system_and_user_messages(mock_completions, completion):
    mock_completions.create.return_value = completion(content="Hello there")

    client = GatewayClient(model_name="test-model")
    result = await client.generate_text("You are helpful.", "Say hello", max_tokens=50)

    assert result == "Hello there"
    kwargs = mock_completions.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["max_tokens"] == 50
    assert kwargs["messages"] == [
        {"role": "system", "content": "You are helpful."},
        {"role": "user", "content": "Say hello"},
    ]


@pytest.mark.asyncio
async def test_generate_text_without_system_prompt(mock_completions, completion):
    mock_completions.create.return_value = completion(content="a prompt")

    client = GatewayClient(model_name="test-model")
    parts = [text_part("Describe this"), image_part("data:image/png;base64,AAAA")]
    await client.generate_text(None, parts)

    messages = mock_completions.create.call_args.kwargs["messages"]
    assert messages == [{"role": "user", "content": parts}]
    assert "max_tokens" not in mock_completions.create.call_args.kwargs


@pytest.mark.asyncio
async def test_generate_image_requests_image_modality(mock_completions, completion):
    mock_completions.create.return_value = completion(image_url="data:image/png;base64,OUT")

    client = GatewayClient(model_name="image-model")
    result = await client.generate_image([text_part("Edit this"), image_part("https://cdn/in.png")])

    assert result == "data:image/png;base64,OUT"
    kwargs = mock_completions.create.call_args.kwargs
    assert kwargs["extra_body"] == {"modalities": ["image", "text"]}
    assert kwargs["messages"][0]["role"] == "user"


@pytest.mark.asyncio
async def test_generate_image_returns_none_without_images(mock_completions, completion):
    mock_completions.create.return_value = completion(content="I cannot do that")

    result = await GatewayClient(model_name="image-model").generate_image("Edit this")

    assert result is None


@pytest.mark.asyncio
async def test_empty_choices_return_none(mock_completions, completion):
    mock_completions.create.return_value = completion(with_choices=False)

    result = await GatewayClient(model_name="test-model").generate_text("sys", "user")

    assert result is None


@pytest.mark.asyncio
async def test_rate_limit_maps_to_429(mock_completions, status_error):
    mock_completions.create.side_effect = status_error(429)

    with pytest.raises(RateLimitError) as exc_info:
        await GatewayClient(model_name="test-model").generate_text("sys", "user")

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "Rate limit exceeded. Please try again in a moment."
    assert exc_info.value.upstream_status == 429


@pytest.mark.asyncio
async def test_payment_required_maps_to_402(mock_completions, status_error):
    mock_completions.create.side_effect = status_error(402)

    with pytest.raises(CreditsExhaustedError) as exc_info:
        await GatewayClient(model_name="test-model").generate_image("Edit this")

    assert exc_info.value.status_code == 402
    assert exc_info.value.message == "AI credits depleted. Please add credits to continue."


@pytest.mark.asyncio
async def test_other_upstream_errors_use_failure_message(mock_completions, status_error):
    mock_completions.create.side_effect = status_error(503)

    with pytest.raises(GatewayError) as exc_info:
        await GatewayClient(model_name="test-model").generate_text(
            "sys", "user", failure_message="Failed to refine prompt"
        )

    assert not isinstance(exc_info.value, (RateLimitError, CreditsExhaustedError))
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Failed to refine prompt"
    assert exc_info.value.upstream_status == 503


@pytest.mark.asyncio
async def test_tool_wording_overrides_rate_limit_and_credit_messages(mock_completions, status_error):
    client = GatewayClient(model_name="test-model")
    wording = {
        "rate_limit_message": "Rate limits exceeded. Please try again later.",
        "credits_message": "Payment required. Please add credits to your workspace.",
    }

    mock_completions.create.side_effect = status_error(429)
    with pytest.raises(RateLimitError) as rate_limited:
        await client.generate_text("sys", "user", **wording)

    mock_completions.create.side_effect = status_error(402)
    with pytest.raises(CreditsExhaustedError) as out_of_credits:
        await client.generate_image("Edit this", **wording)

    assert rate_limited.value.status_code == 429
    assert rate_limited.value.message == "Rate limits exceeded. Please try again later."
    assert out_of_credits.value.status_code == 402
    assert out_of_credits.value.message == "Payment required. Please add credits to your workspace."


@pytest.mark.asyncio
async def test_image_completion_carries_text_and_finish_reason(mock_completions, completion):
    mock_completions.create.return_value = completion(
        content="Softened the light.", image_url="data:image/png;base64,AAA", finish_reason="IMAGE_SAFETY"
    )

    result = await GatewayClient(model_name="image-model").generate_image_completion("Edit this")

    assert result.image_url == "data:image/png;base64,AAA"
    assert result.text == "Softened the light."
    assert result.finish_reason == "IMAGE_SAFETY"


@pytest.mark.asyncio
async def test_connection_error_maps_to_gateway_error(mock_completions):
    mock_completions.create.side_effect = openai.APIConnectionError(
        request=httpx.Request("POST", "https://ai.gateway.lovable.dev/v1/chat/completions")
    )

    with pytest.raises(GatewayError) as exc_info:
        await GatewayClient(model_name="test-model").generate_text("sys", "user", failure_message="Failed")

    assert exc_info.value.message == "Failed"


@pytest.mark.asyncio
async def test_error_payload_in_success_response(mock_completions, completion):
    mock_completions.create.return_value = completion(error={"message": "Model overloaded", "code": 503})

    with pytest.raises(GatewayError) as exc_info:
        await GatewayClient(model_name="test-model").generate_text("sys", "user")

    assert exc_info.value.message == "Model overloaded"


@pytest.mark.asyncio
async def test_missing_api_key_raises_before_any_request():
    with patch("bh_studio.agent.llm_client.AsyncOpenAI") as openai_cls:
        with patch("bh_studio.agent.llm_client.settings.AI_GATEWAY_API_KEY", None):
            client = GatewayClient(model_name="test-model")

            with pytest.raises(ServiceNotConfiguredError) as exc_info:
                await client.generate_text("sys", "user")

    assert exc_info.value.message == "AI service not configured"
    openai_cls.assert_not_called()


def test_client_is_created_without_retries():
    mock_client_instance = MagicMock()
    mock_client_instance.chat.completions.create = AsyncMock()

    with patch("bh_studio.agent.llm_client.AsyncOpenAI", return_value=mock_client_instance) as openai_cls:
        client = GatewayClient(model_name="test-model", base_url="https://gateway.test/v1", api_key="key")
        assert client.client is mock_client_instance
        assert client.client is mock_client_instance

    openai_cls.assert_called_once_with(base_url="https://gateway.test/v1", api_key="key", max_retries=0)
