import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from bh_studio.agent.artifacts import ImageToVideoRequest
from bh_studio.agent.errors import GatewayError, RateLimitError, ServiceNotConfiguredError, ToolInputError
from bh_studio.agent.video import (
    DEFAULT_MOTION_PROMPT,
    VIDEO_PRESETS,
    ImageToVideoAgent,
    VideoClient,
    resolve_motion_prompt,
)

BASE_URL = "https://replicate.test/v1"
IMAGE = "data:image/png;base64,SU1BR0U="
VIDEO_URL = "https://replicate.delivery/out.mp4"


def make_video_client(handler, max_attempts=3):
    return VideoClient(
        api_key="replicate-key",
        base_url=BASE_URL,
        poll_interval=5,
        max_attempts=max_attempts,
        transport=httpx.MockTransport(handler),
        sleep=AsyncMock(),
    )


def test_resolve_motion_prompt():
    assert resolve_motion_prompt("fashion-walk", None) == VIDEO_PRESETS["fashion-walk"]
    assert resolve_motion_prompt("fashion-walk", "  slow spin ") == "slow spin"
    assert resolve_motion_prompt("unknown", None) == DEFAULT_MOTION_PROMPT
    assert resolve_motion_prompt(None, "") == DEFAULT_MOTION_PROMPT


@pytest.mark.asyncio
async def test_polls_until_succeeded():
    statuses = iter(["starting", "processing", "succeeded"])
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-1", "status": "starting"})
        status = next(statuses)
        body = {"id": "pred-1", "status": status}
        if status == "succeeded":
            body["output"] = [VIDEO_URL]
        return httpx.Response(200, json=body)

    client = make_video_client(handler, max_attempts=5)
    video_url = await client.generate(IMAGE)

    assert video_url == VIDEO_URL
    submit = requests[0]
    assert submit.url.path == "/v1/predictions"
    assert submit.headers["Authorization"] == "Bearer replicate-key"
    assert submit.headers["Prefer"] == "wait"
    assert json.loads(submit.content)["input"]["input_image"] == IMAGE
    assert [r.url.path for r in requests[1:]] == ["/v1/predictions/pred-1"] * 3
    assert client.sleep.await_count == 3
    client.sleep.assert_awaited_with(5)


@pytest.mark.asyncio
async def test_immediate_success_skips_polling():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, json={"id": "pred-1", "status": "succeeded", "output": VIDEO_URL})

    client = make_video_client(handler)

    assert await client.generate(IMAGE) == VIDEO_URL
    client.sleep.assert_not_awaited()


@pytest.mark.asyncio
async def test_failed_prediction_stops_polling():
    polls = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-1", "status": "starting"})
        polls.append(request)
        return httpx.Response(200, json={"id": "pred-1", "status": "failed", "error": "NSFW"})

    client = make_video_client(handler, max_attempts=10)

    with pytest.raises(GatewayError) as exc_info:
        await client.generate(IMAGE)

    assert exc_info.value.message == "Video generation failed. Please try with a different image."
    assert len(polls) == 1


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    polls = []

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-1", "status": "starting"})
        polls.append(request)
        return httpx.Response(200, json={"id": "pred-1", "status": "processing"})

    client = make_video_client(handler, max_attempts=3)

    with pytest.raises(GatewayError) as exc_info:
        await client.generate(IMAGE)

    assert exc_info.value.message == "Video generation is taking longer than expected. Please try again."
    assert len(polls) == 3
    assert client.sleep.await_count == 3


@pytest.mark.asyncio
async def test_poll_errors_are_skipped():
    responses = iter(
        [
            httpx.Response(500, text="boom"),
            httpx.Response(200, json={"id": "pred-1", "status": "succeeded", "output": VIDEO_URL}),
        ]
    )

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(201, json={"id": "pred-1", "status": "starting"})
        return next(responses)

    assert await make_video_client(handler).generate(IMAGE) == VIDEO_URL


@pytest.mark.asyncio
async def test_submit_rate_limit():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, json={"detail": "throttled"})

    with pytest.raises(RateLimitError):
        await make_video_client(handler).generate(IMAGE)


@pytest.mark.asyncio
async def test_submit_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"detail": "bad input"})

    with pytest.raises(GatewayError) as exc_info:
        await make_video_client(handler).generate(IMAGE)

    assert exc_info.value.message == "Video generation failed. Please try again."


@pytest.mark.asyncio
async def test_submit_transport_error_is_a_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GatewayError) as exc_info:
        await make_video_client(handler).generate(IMAGE)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "Video generation failed. Please try again."


@pytest.mark.asyncio
async def test_submit_unreadable_body_is_a_gateway_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, content=b"<html>bad gateway</html>")

    with pytest.raises(GatewayError) as exc_info:
        await make_video_client(handler).generate(IMAGE)

    assert exc_info.value.message == "Video generation failed. Please try again."


@pytest.mark.asyncio
async def test_missing_api_key():
    client = VideoClient(api_key=None)
    client.api_key = None

    with pytest.raises(ServiceNotConfiguredError) as exc_info:
        await client.generate(IMAGE)

    assert exc_info.value.message == "Video generation service is not configured"


@pytest.mark.asyncio
async def test_image_to_video_agent_requires_image():
    video_client = MagicMock()
    video_client.generate = AsyncMock()

    with pytest.raises(ToolInputError) as exc_info:
        await ImageToVideoAgent(video_client=video_client).run(ImageToVideoRequest(preset="fashion-walk"))

    assert exc_info.value.message == "Image is required"
    video_client.generate.assert_not_awaited()


@pytest.mark.asyncio
async def test_image_to_video_agent_logs_generation():
    video_client = MagicMock()
    video_client.generate = AsyncMock(return_value=VIDEO_URL)
    generation_logger = MagicMock()
    generation_logger.arecord = AsyncMock(return_value=True)

    agent = ImageToVideoAgent(video_client=video_client, generation_logger=generation_logger)
    result = await agent.run(ImageToVideoRequest(image=IMAGE, preset="studio-portrait", user_id="user-1"))

    assert result.model_dump(by_alias=True) == {"videoUrl": VIDEO_URL}
    video_client.generate.assert_awaited_once_with(IMAGE)
    kwargs = generation_logger.arecord.await_args.kwargs
    assert kwargs["feature_name"] == "Image to Video Generator"
    assert kwargs["outputs"] == [VIDEO_URL]
