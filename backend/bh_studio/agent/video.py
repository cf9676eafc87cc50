import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from bh_studio.agent.artifacts import ImageToVideoRequest, VideoResponse
from bh_studio.agent.errors import (
    GatewayError,
    RateLimitError,
    ServiceNotConfiguredError,
    ToolInputError,
)
from bh_studio.agent.generation_log import GenerationLogger
from bh_studio.core.config import settings

logger = logging.getLogger(__name__)

VIDEO_PRESETS = {
    "fashion-walk": (
        "Subtle body movement with flowing fabric motion, runway-style elegant walk, cinematic lighting "
        "with soft shadows, professional fashion show atmosphere, smooth natural movement"
    ),
    "studio-portrait": (
        "Gentle head movement with natural blinking, soft camera push-in zoom, studio lighting with "
        "professional backdrop, subtle breathing motion, intimate portrait feel"
    ),
    "lifestyle-reel": (
        "Casual natural movement in everyday environment, social media ready content, warm ambient "
        "lighting, relaxed authentic motion, lifestyle photography style"
    ),
    "product-showcase": (
        "Smooth camera pan around subject, professional focus shift, premium product highlight with "
        "elegant motion, studio quality presentation, commercial advertising style"
    ),
    "cinematic-mood": (
        "Slow dramatic movement with depth of field, film-style lighting and color grading, atmospheric "
        "mood with shadows, professional cinematography, emotional visual storytelling"
    ),
}

DEFAULT_MOTION_PROMPT = "Subtle natural movement, smooth camera motion, cinematic quality, 5 seconds duration"

TERMINAL_STATUSES = {"succeeded", "failed", "canceled"}

FEATURE_NAME = "Image to Video Generator"

SUBMIT_FAILURE_MESSAGE = "Video generation failed. Please try again."


def resolve_motion_prompt(preset: str | None, custom_prompt: str | None) -> str:
    """A custom description wins over a preset; unknown presets fall back to the default motion."""
    if custom_prompt and custom_prompt.strip():
        return custom_prompt.strip()
    if preset and preset in VIDEO_PRESETS:
        return VIDEO_PRESETS[preset]
    return DEFAULT_MOTION_PROMPT


class VideoClient:
    """Submits image-to-video predictions and polls them until a terminal status."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        poll_interval: float | None = None,
        max_attempts: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self.api_key = api_key or settings.REPLICATE_API_KEY
        self.base_url = base_url or settings.REPLICATE_BASE_URL
        self.poll_interval = settings.VIDEO_POLL_INTERVAL_SECONDS if poll_interval is None else poll_interval
        self.max_attempts = settings.VIDEO_MAX_POLL_ATTEMPTS if max_attempts is None else max_attempts
        self.transport = transport
        self.sleep = sleep

    def _client(self) -> httpx.AsyncClient:
        if not self.api_key:
            logger.error("REPLICATE_API_KEY is not configured")
            raise ServiceNotConfiguredError("Video generation service is not configured")
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self.api_key}"},
            timeout=settings.VIDEO_REQUEST_TIMEOUT_SECONDS,
            transport=self.transport,
        )

    async def submit(self, client: httpx.AsyncClient, image: str) -> dict[str, Any]:
        try:
            response = await client.post(
                "/predictions",
                headers={"Prefer": "wait"},
                json={
                    "version": settings.VIDEO_MODEL_VERSION,
                    "input": {
                        "input_image": image,
                        "motion_bucket_id": 127,
                        "cond_aug": 0.02,
                        "decoding_t": 14,
                        "seed": random.randint(0, 999_999),
                        "fps": 6,
                        "sizing_strategy": "maintain_aspect_ratio",
                    },
                },
            )
        except httpx.HTTPError as e:
            logger.error("Could not reach video API: %s", e)
            raise GatewayError(SUBMIT_FAILURE_MESSAGE) from e
        if response.is_error:
            logger.error("Video API error: %s %s", response.status_code, response.text)
            if response.status_code == 429:
                raise RateLimitError(upstream_status=429)
            raise GatewayError(SUBMIT_FAILURE_MESSAGE, upstream_status=response.status_code)
        try:
            prediction = response.json()
        except ValueError as e:
            logger.error("Unreadable video API response: %s", response.text)
            raise GatewayError(SUBMIT_FAILURE_MESSAGE) from e
        logger.info("Prediction created: %s %s", prediction.get("id"), prediction.get("status"))
        return prediction

    async def wait_for(self, client: httpx.AsyncClient, prediction: dict[str, Any]) -> dict[str, Any]:
        """
        Poll at most `max_attempts` times, `poll_interval` seconds apart.
        Failed polls are skipped; the last seen prediction is returned either way.
        """
        result = prediction
        if result.get("status") in TERMINAL_STATUSES:
            return result

        for attempt in range(1, self.max_attempts + 1):
            await self.sleep(self.poll_interval)
            try:
                response = await client.get(f"/predictions/{prediction['id']}")
            except httpx.HTTPError as e:
                logger.warning("Polling error on attempt %s/%s: %s", attempt, self.max_attempts, e)
                continue
            if response.is_error:
                logger.warning("Polling error on attempt %s/%s: %s", attempt, self.max_attempts, response.status_code)
                continue

            try:
                result = response.json()
            except ValueError:
                logger.warning("Unreadable poll response on attempt %s/%s", attempt, self.max_attempts)
                continue
            logger.info("Poll status (%s/%s): %s", attempt, self.max_attempts, result.get("status"))
            if result.get("status") in TERMINAL_STATUSES:
                break
        return result

    async def generate(self, image: str) -> str:
        async with self._client() as client:
            prediction = await self.submit(client, image)
            result = await self.wait_for(client, prediction)

        status = result.get("status")
        if status in ("failed", "canceled"):
            logger.error("Video generation failed: %s", result.get("error"))
            raise GatewayError("Video generation failed. Please try with a different image.")
        if status != "succeeded":
            logger.error("Video generation timed out, status: %s", status)
            raise GatewayError("Video generation is taking longer than expected. Please try again.")

        output = result.get("output")
        if isinstance(output, list):
            output = output[0] if output else None
        if not output:
            raise GatewayError("Video generation returned no output.")
        return output


class ImageToVideoAgent:
    def __init__(self, video_client: VideoClient | None = None, generation_logger: GenerationLogger | None = None):
        self.video_client = video_client or VideoClient()
        self.generation_logger = generation_logger

    async def run(self, input_data: ImageToVideoRequest) -> VideoResponse:
        if not input_data.image:
            raise ToolInputError("Image is required")

        # The current video model has no prompt input; the motion description is informational.
        motion_prompt = resolve_motion_prompt(input_data.preset, input_data.custom_prompt)
        logger.info("Starting video generation with prompt: %s", motion_prompt)

        video_url = await self.video_client.generate(input_data.image)
        logger.info("Video generated successfully: %s", video_url)

        if input_data.user_id and self.generation_logger:
            await self.generation_logger.arecord(
                user_id=input_data.user_id,
                feature_name=FEATURE_NAME,
                prefix="image-to-video",
                uploads=[input_data.image],
                passthrough_inputs=[],
                outputs=[video_url],
            )
        return VideoResponse(video_url=video_url)
