import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from bh_studio.agent.artifacts import (
    ApplyBrandingRequest,
    ApplyMakeupRequest,
    BackgroundResponse,
    CharacterImageRequest,
    CinematicResponse,
    CinematicTransformRequest,
    DressChangeRequest,
    EnhancedPhotoResponse,
    EnhancePhotoRequest,
    EnhanceSkinRequest,
    ErrorResponse,
    ExtractDressRequest,
    FaceSwapRequest,
    FullLookTransferRequest,
    GenerateBackgroundRequest,
    GeneratedImageResponse,
    InfluencerImageRequest,
    LogoRequest,
    LogoResponse,
    PoseTransferRequest,
    RemovePeopleRequest,
)
from bh_studio.agent.errors import StudioError
from bh_studio.agent.image_tools import (
    ApplyBrandingAgent,
    ApplyMakeupAgent,
    CharacterImageAgent,
    CinematicTransformAgent,
    DressChangeAgent,
    EnhancePhotoAgent,
    EnhanceSkinAgent,
    ExtractDressAgent,
    FaceSwapAgent,
    FullLookTransferAgent,
    GenerateBackgroundAgent,
    GenerateLogoAgent,
    InfluencerImageAgent,
    PoseTransferAgent,
    RemovePeopleAgent,
)
from bh_studio.api.deps import GenerationLoggerDep

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse} for status in (400, 402, 422, 429, 500)
}

router = APIRouter(responses=ERROR_RESPONSES)
logger = logging.getLogger(__name__)


@router.post("/dress-change", response_model=GeneratedImageResponse)
async def dress_change(request: DressChangeRequest, generation_logger: GenerationLoggerDep) -> Any:
    return await DressChangeAgent(generation_logger=generation_logger).run(request)


@router.post("/face-swap", response_model=GeneratedImageResponse)
async def face_swap(request: FaceSwapRequest) -> Any:
    return await FaceSwapAgent().run(request)


@router.post("/pose-transfer", response_model=GeneratedImageResponse)
async def pose_transfer(request: PoseTransferRequest) -> Any:
    return await PoseTransferAgent().run(request)


@router.post("/full-look-transfer", response_model=GeneratedImageResponse)
async def full_look_transfer(request: FullLookTransferRequest) -> Any:
    return await FullLookTransferAgent().run(request)


@router.post("/apply-branding", response_model=GeneratedImageResponse)
async def apply_branding(request: ApplyBrandingRequest, generation_logger: GenerationLoggerDep) -> Any:
    return await ApplyBrandingAgent(generation_logger=generation_logger).run(request)


@router.post("/enhance-skin", response_model=GeneratedImageResponse)
async def enhance_skin(request: EnhanceSkinRequest) -> Any:
    return await EnhanceSkinAgent().run(request)


@router.post("/extract-dress-to-dummy", response_model=GeneratedImageResponse)
async def extract_dress_to_dummy(request: ExtractDressRequest) -> Any:
    return await ExtractDressAgent().run(request)


@router.post("/apply-makeup", response_model=GeneratedImageResponse)
async def apply_makeup(request: ApplyMakeupRequest) -> Any:
    return await ApplyMakeupAgent().run(request)


@router.post("/generate-background", response_model=BackgroundResponse)
async def generate_background(request: GenerateBackgroundRequest) -> Any:
    return await GenerateBackgroundAgent().run(request)


@router.post("/enhance-photo", response_model=EnhancedPhotoResponse)
async def enhance_photo(request: EnhancePhotoRequest, generation_logger: GenerationLoggerDep) -> Any:
    return await EnhancePhotoAgent(generation_logger=generation_logger).run(request)


@router.post("/remove-people-from-image", response_model=GeneratedImageResponse)
async def remove_people_from_image(request: RemovePeopleRequest, generation_logger: GenerationLoggerDep) -> Any:
    return await RemovePeopleAgent(generation_logger=generation_logger).run(request)


@router.post("/cinematic-transform", response_model=CinematicResponse)
async def cinematic_transform(request: CinematicTransformRequest) -> Any:
    return await CinematicTransformAgent().run(request)


@router.post("/generate-character-image", response_model=GeneratedImageResponse)
async def generate_character_image(request: CharacterImageRequest) -> Any:
    return await CharacterImageAgent().run(request)


@router.post("/generate-influencer-image", response_model=GeneratedImageResponse)
async def generate_influencer_image(request: InfluencerImageRequest) -> Any:
    return await InfluencerImageAgent().run(request)


@router.post("/generate-logo", response_model=LogoResponse | ErrorResponse)
async def generate_logo(request: LogoRequest, generation_logger: GenerationLoggerDep) -> Any:
    """Logo failures come back with status 200 and `success: false` for the brand form to render."""
    try:
        return await GenerateLogoAgent(generation_logger=generation_logger).run(request)
    except StudioError as e:
        logger.error("Logo generation error: %s", e.message)
        return JSONResponse(status_code=200, content={"error": e.message, "success": False})
