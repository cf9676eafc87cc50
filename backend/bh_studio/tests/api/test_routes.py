from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from bh_studio.agent.artifacts import GeneratedImageResponse
from bh_studio.agent.errors import CreditsExhaustedError, RateLimitError, UnchangedImageError
from bh_studio.api.deps import get_gem_cost_cache, get_gem_wallet, get_generation_logger
from bh_studio.core.config import settings
from bh_studio.gems.costs import GemCostCache
from bh_studio.agent.video import VideoClient
from bh_studio.gems.wallet import GemWallet
from bh_studio.main import app

API = settings.API_V1_STR
OUTPUT_IMAGE = "data:image/png;base64,T1VUUFVU"


@pytest.fixture
def client():
    app.dependency_overrides[get_generation_logger] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health_check(client):
    response = client.get(f"{API}/utils/health-check/")

    assert response.status_code == 200
    assert response.json() is True


def test_cors_preflight(client):
    response = client.options(
        f"{API}/functions/dress-change",
        headers={
            "Origin": "https://studio.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    allowed = response.headers["access-control-allow-headers"].lower()
    for header in ("authorization", "x-client-info", "apikey", "content-type"):
        assert header in allowed


def test_dress_change_end_to_end(client, mock_completions, completion):
    mock_completions.create.return_value = completion(image_url=OUTPUT_IMAGE)

    response = client.post(
        f"{API}/functions/dress-change",
        json={"userImage": "data:image/png;base64,VVNFUg==", "dressImageUrl": "https://cdn.example.com/d.png"},
    )

    assert response.status_code == 200
    assert response.json() == {"generatedImageUrl": OUTPUT_IMAGE}


def test_missing_field_returns_400_error_body(client, mock_completions):
    response = client.post(f"{API}/functions/dress-change", json={"userImage": "data:image/png;base64,VVNFUg=="})

    assert response.status_code == 400
    assert response.json() == {"error": "Dress image is required"}
    mock_completions.create.assert_not_called()


@pytest.mark.parametrize(
    "error, status_code, message",
    [
        (RateLimitError(), 429, "Rate limit exceeded. Please try again in a moment."),
        (CreditsExhaustedError(), 402, "AI credits depleted. Please add credits to continue."),
        (UnchangedImageError("Face swap failed."), 422, "Face swap failed."),
    ],
)
def test_tool_errors_render_error_body(client, error, status_code, message):
    with patch("bh_studio.api.routes.image_tools.FaceSwapAgent") as agent_cls:
        agent_cls.return_value.run = AsyncMock(side_effect=error)

        response = client.post(f"{API}/functions/face-swap", json={"influencerImage": "a", "referenceImage": "b"})

    assert response.status_code == status_code
    assert response.json() == {"error": message}


def test_invalid_body_returns_400(client):
    response = client.post(f"{API}/functions/generate-caption", json={"description": "Saree", "language": "french"})

    assert response.status_code == 400
    assert "error" in response.json()


def test_dress_change_receives_generation_logger(client):
    generation_logger = MagicMock()
    app.dependency_overrides[get_generation_logger] = lambda: generation_logger

    with patch("bh_studio.api.routes.image_tools.DressChangeAgent") as agent_cls:
        agent_cls.return_value.run = AsyncMock(return_value=GeneratedImageResponse(generated_image_url=OUTPUT_IMAGE))
        response = client.post(
            f"{API}/functions/dress-change",
            json={"userImage": "u", "dressImageUrl": "d", "userId": "user-1"},
        )

    assert response.status_code == 200
    agent_cls.assert_called_once_with(generation_logger=generation_logger)
    request = agent_cls.return_value.run.await_args.args[0]
    assert request.user_id == "user-1"


def test_generate_caption(client, mock_completions, completion):
    mock_completions.create.return_value = completion(content="Order now!")

    response = client.post(f"{API}/functions/generate-caption", json={"description": "Leather bag"})

    assert response.status_code == 200
    assert response.json() == {"captions": ["Order now!"]}


def test_prompt_engineer_success(client, mock_completions, completion):
    mock_completions.create.return_value = completion(content="better prompt")

    response = client.post(f"{API}/functions/prompt-engineer", json={"prompt": "a cat", "promptType": "image"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["originalPrompt"] == "a cat"
    assert body["finalPrompt"] == "better prompt"
    assert [agent["id"] for agent in body["agents"]] == ["detailer", "contextualizer", "alignment", "polisher", "final"]


def test_prompt_engineer_errors_use_status_200(client, mock_completions, status_error):
    mock_completions.create.side_effect = status_error(429)

    response = client.post(f"{API}/functions/prompt-engineer", json={"prompt": "a cat"})

    assert response.status_code == 200
    assert response.json() == {"error": "Rate limit exceeded. Please try again in a moment."}


def test_prompt_engineer_blank_prompt(client, mock_completions):
    response = client.post(f"{API}/functions/prompt-engineer", json={"prompt": " "})

    assert response.status_code == 200
    assert response.json() == {"error": "Please provide a prompt to refine"}


def test_image_to_video_requires_image(client):
    response = client.post(f"{API}/functions/image-to-video", json={"preset": "fashion-walk"})

    assert response.status_code == 400
    assert response.json() == {"error": "Image is required"}


def test_gem_costs_and_pricing(client):
    cache = GemCostCache(lambda: {"dress-change": 20}, ttl_seconds=300.0)
    app.dependency_overrides[get_gem_cost_cache] = lambda: cache

    costs = client.get(f"{API}/gems/costs").json()
    assert costs["costs"]["dress-change"] == 20
    assert costs["costs"]["generate-caption"] == 1
    assert "high-impact" in costs["categories"]

    assert client.get(f"{API}/gems/costs/unknown-tool").json() == {"feature_key": "unknown-tool", "gem_cost": 1}
    assert client.post(f"{API}/gems/costs/invalidate").status_code == 200
    assert not cache.is_fresh

    pricing = client.get(f"{API}/gems/pricing").json()
    assert [p["id"] for p in pricing["subscriptions"]] == ["weekly-spark", "monthly-elite"]
    assert [p["price"] for p in pricing["topups"]] == [50, 100]


def test_gem_balance_check_and_deduct(client):
    wallet = MagicMock(spec=GemWallet)
    wallet.get_balance.return_value = {"gems_balance": 40, "subscription_type": None, "subscription_expires_at": None}
    wallet.check.return_value = {
        "feature_key": "dress-change",
        "cost": 15,
        "balance": 40,
        "sufficient": True,
        "shortage": 0,
    }
    wallet.deduct.return_value = {"success": True, "new_balance": 25, "cost": 15}
    app.dependency_overrides[get_gem_wallet] = lambda: wallet

    assert client.get(f"{API}/gems/user-1").json()["gems_balance"] == 40
    assert client.get(f"{API}/gems/user-1/check/dress-change").json()["sufficient"] is True
    assert client.post(f"{API}/gems/user-1/deduct/dress-change").json() == {
        "success": True,
        "new_balance": 25,
        "cost": 15,
    }
    wallet.deduct.assert_called_once_with("user-1", "dress-change")


def test_unexpected_error_returns_json_500():
    with patch("bh_studio.api.routes.image_tools.FaceSwapAgent") as agent_cls:
        agent_cls.return_value.run = AsyncMock(side_effect=RuntimeError("boom"))
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post(
                f"{API}/functions/face-swap",
                json={"influencerImage": "a", "referenceImage": "b"},
                headers={"Origin": "https://studio.example.com"},
            )

    assert response.status_code == 500
    assert response.json() == {"error": "An unexpected error occurred"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_unreachable_video_api_returns_json_error(client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    video_client = VideoClient(api_key="replicate-key", transport=httpx.MockTransport(handler), sleep=AsyncMock())
    with patch("bh_studio.agent.video.VideoClient", return_value=video_client):
        response = client.post(f"{API}/functions/image-to-video", json={"image": "data:image/png;base64,SU1H"})

    assert response.status_code == 500
    assert response.json() == {"error": "Video generation failed. Please try again."}


def test_gem_balance_falls_back_to_zero_when_wallet_unreadable(client):
    supabase = MagicMock()
    supabase.rpc.return_value.execute.side_effect = ConnectionError("database unreachable")
    wallet = GemWallet(supabase, GemCostCache(lambda: {}, ttl_seconds=300.0))
    app.dependency_overrides[get_gem_wallet] = lambda: wallet

    response = client.get(f"{API}/gems/user-1")

    assert response.status_code == 200
    assert response.json()["gems_balance"] == 0


def test_prompt_engineer_non_text_prompt(client, mock_completions):
    response = client.post(f"{API}/functions/prompt-engineer", json={"prompt": 42})

    assert response.status_code == 200
    assert response.json() == {"error": "Please provide a prompt to refine"}
    mock_completions.create.assert_not_called()


def test_enhance_photo_returns_creative_brief(client, mock_completions, completion):
    mock_completions.create.return_value = completion(content=" Warmer light, same subject. ", image_url=OUTPUT_IMAGE)

    response = client.post(
        f"{API}/functions/enhance-photo",
        json={"image": "data:image/png;base64,SU1H", "photoType": "product", "outputQuality": "ultra_hd"},
    )

    assert response.status_code == 200
    assert response.json() == {"generatedImageUrl": OUTPUT_IMAGE, "creativeBrief": "Warmer light, same subject."}


@pytest.mark.parametrize(
    "path, body, message",
    [
        ("remove-people-from-image", {}, "No image provided"),
        ("cinematic-transform", {"image": "i"}, "Please select at least a cinematic style or a background option"),
        ("generate-character-image", {"characterImage": "c"}, "No prompt provided"),
        (
            "generate-influencer-image",
            {"referenceImages": ["r"] * 3},
            "Please upload at least 8 reference images for training",
        ),
    ],
)
def test_studio_tools_reject_incomplete_requests(client, mock_completions, path, body, message):
    response = client.post(f"{API}/functions/{path}", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    mock_completions.create.assert_not_called()


def test_cinematic_transform_names_looks(client, mock_completions, completion):
    mock_completions.create.return_value = completion(image_url=OUTPUT_IMAGE)

    response = client.post(
        f"{API}/functions/cinematic-transform",
        json={"image": "data:image/png;base64,SU1H", "customBackgroundImage": "data:image/png;base64,Qkc="},
    )

    assert response.status_code == 200
    assert response.json() == {
        "generatedImageUrl": OUTPUT_IMAGE,
        "presetName": "None",
        "backgroundName": "Custom Background",
    }


def test_generate_logo_labels_concepts(client, mock_completions, completion):
    mock_completions.create.return_value = completion(image_url=OUTPUT_IMAGE)

    response = client.post(f"{API}/functions/generate-logo", json={"brandName": "Aurelle", "numVariations": 2})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "images": [{"url": OUTPUT_IMAGE, "label": "Concept A"}, {"url": OUTPUT_IMAGE, "label": "Concept B"}],
    }


def test_generate_logo_errors_use_status_200(client, mock_completions):
    response = client.post(f"{API}/functions/generate-logo", json={"industry": "fashion"})

    assert response.status_code == 200
    assert response.json() == {"error": "Brand name is required", "success": False}
    mock_completions.create.assert_not_called()
