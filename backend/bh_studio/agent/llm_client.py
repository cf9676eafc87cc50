import logging
from typing import Any, NamedTuple

from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from bh_studio.agent.errors import GatewayError, ServiceNotConfiguredError, error_for_status
from bh_studio.core.config import settings

logger = logging.getLogger(__name__)

ContentPart = dict[str, Any]


def text_part(text: str) -> ContentPart:
    return {"type": "text", "text": text}


def image_part(url: str) -> ContentPart:
    return {"type": "image_url", "image_url": {"url": url}}


def _first_image_url(message: Any) -> str | None:
    """Read `message.images[0].image_url.url`; the gateway returns it as an extra field."""
    images = getattr(message, "images", None)
    if not images:
        return None
    first = images[0]
    image_url = first.get("image_url") if isinstance(first, dict) else getattr(first, "image_url", None)
    if isinstance(image_url, dict):
        return image_url.get("url")
    return getattr(image_url, "url", None)


def _build_messages(system_prompt: str | None, user_content: str | list[ContentPart]) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": user_content})
    return messages


def _payload_error_message(response: Any) -> str | None:
    error = getattr(response, "error", None)
    if not error:
        return None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return "AI service temporarily unavailable"


def _finish_reason(choice: Any) -> str | None:
    """`finish_reason`, or the provider's `native_finish_reason` extra field."""
    for field in ("finish_reason", "native_finish_reason"):
        value = getattr(choice, field, None)
        if isinstance(value, str) and value:
            return value
    return None


class ImageCompletion(NamedTuple):
    image_url: str | None
    text: str | None
    finish_reason: str | None


class GatewayClient:
    """Client for the hosted multimodal completion gateway (OpenAI chat-completions API)."""

    def __init__(
        self,
        model_name: str | None = None,
        base_url: str | None = None,
        api_key: str | None = None,
    ):
        self.model_name = model_name or settings.MODEL_TEXT
        self._api_key = api_key
        self._base_url = base_url
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            resolved_api_key = self._api_key or settings.AI_GATEWAY_API_KEY
            if not resolved_api_key:
                logger.error("AI_GATEWAY_API_KEY is not configured")
                raise ServiceNotConfiguredError()
            # Upstream failures are reported as-is; the gateway is never retried.
            self._client = AsyncOpenAI(
                base_url=self._base_url or settings.AI_GATEWAY_BASE_URL,
                api_key=resolved_api_key,
                max_retries=0,
            )
        return self._client

    async def _complete(
        self,
        messages: list[dict[str, Any]],
        *,
        failure_message: str | None = None,
        rate_limit_message: str | None = None,
        credits_message: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Run one completion and return its first choice, or None when there are no choices."""
        client = self.client
        logger.info("Issuing request to model %s...", self.model_name)
        try:
            response = await client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                **kwargs,
            )
        except APIStatusError as e:
            logger.error("AI gateway error from %s: %s %s", self.model_name, e.status_code, e.message)
            raise error_for_status(
                e.status_code,
                failure_message,
                rate_limit_message=rate_limit_message,
                credits_message=credits_message,
            ) from e
        except APIConnectionError as e:
            logger.error("Could not reach AI gateway for %s: %s", self.model_name, e)
            raise GatewayError(failure_message) from e

        payload_error = _payload_error_message(response)
        if payload_error:
            logger.error("AI gateway error payload from %s: %s", self.model_name, payload_error)
            raise GatewayError(payload_error)

        logger.info("Received response from %s.", self.model_name)
        choices = getattr(response, "choices", None)
        if not choices:
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            return None
        return choices[0]

    async def generate_text(
        self,
        system_prompt: str | None,
        user_content: str | list[ContentPart],
        *,
        max_tokens: int | None = None,
        failure_message: str | None = None,
        rate_limit_message: str | None = None,
        credits_message: str | None = None,
    ) -> str | None:
        """
        Run a single text completion and return the first choice's content.
        `system_prompt` may be None when the instructions travel inside `user_content`.
        """
        messages = _build_messages(system_prompt, user_content)

        kwargs: dict[str, Any] = {}
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        choice = await self._complete(
            messages,
            failure_message=failure_message,
            rate_limit_message=rate_limit_message,
            credits_message=credits_message,
            **kwargs,
        )
        if choice is None:
            return None
        return choice.message.content

    async def generate_image_completion(
        self,
        content: str | list[ContentPart],
        *,
        system_prompt: str | None = None,
        failure_message: str | None = None,
        rate_limit_message: str | None = None,
        credits_message: str | None = None,
    ) -> ImageCompletion:
        """
        Send text + image parts as one user message with image output enabled.
        Returns the first generated image URL (usually a base64 data URL) along
        with any text the model wrote and the finish reason.
        """
        messages = _build_messages(system_prompt, content)

        choice = await self._complete(
            messages,
            failure_message=failure_message,
            rate_limit_message=rate_limit_message,
            credits_message=credits_message,
            extra_body={"modalities": ["image", "text"]},
        )
        if choice is None:
            return ImageCompletion(None, None, None)

        message = choice.message
        text = getattr(message, "content", None)
        image_url = _first_image_url(message)
        if not image_url:
            logger.error("No image in response from %s: %s", self.model_name, text)
        return ImageCompletion(
            image_url=image_url,
            text=text if isinstance(text, str) else None,
            finish_reason=_finish_reason(choice),
        )

    async def generate_image(
        self,
        content: str | list[ContentPart],
        *,
        system_prompt: str | None = None,
        failure_message: str | None = None,
        rate_limit_message: str | None = None,
        credits_message: str | None = None,
    ) -> str | None:
        """Like `generate_image_completion`, returning only the image URL."""
        completion = await self.generate_image_completion(
            content,
            system_prompt=system_prompt,
            failure_message=failure_message,
            rate_limit_message=rate_limit_message,
            credits_message=credits_message,
        )
        return completion.image_url
