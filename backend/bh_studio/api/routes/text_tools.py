from typing import Any

from fastapi import APIRouter

from bh_studio.agent.artifacts import (
    CaptionRequest,
    CaptionResponse,
    DetailedPromptResponse,
    ExtractedPromptResponse,
    ExtractImagePromptRequest,
    GeneratePromptRequest,
    RefinedPromptResponse,
    RefinePromptRequest,
)
from bh_studio.agent.text_tools import (
    CaptionAgent,
    DetailedPromptAgent,
    ImagePromptExtractorAgent,
    RefinePromptAgent,
)
from bh_studio.api.routes.image_tools import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/generate-caption", response_model=CaptionResponse)
async def generate_caption(request: CaptionRequest) -> Any:
    return await CaptionAgent().run(request)


@router.post("/extract-image-prompt", response_model=ExtractedPromptResponse)
async def extract_image_prompt(request: ExtractImagePromptRequest) -> Any:
    return await ImagePromptExtractorAgent().run(request)


@router.post("/generate-prompt", response_model=DetailedPromptResponse)
async def generate_prompt(request: GeneratePromptRequest) -> Any:
    return await DetailedPromptAgent().run(request)


@router.post("/refine-prompt", response_model=RefinedPromptResponse)
async def refine_prompt(request: RefinePromptRequest) -> Any:
    return await RefinePromptAgent().run(request)
