from typing import Any

from fastapi import APIRouter

from bh_studio.agent.artifacts import ImageToVideoRequest, VideoResponse
from bh_studio.agent.video import ImageToVideoAgent
from bh_studio.api.deps import GenerationLoggerDep
from bh_studio.api.routes.image_tools import ERROR_RESPONSES

router = APIRouter(responses=ERROR_RESPONSES)


@router.post("/image-to-video", response_model=VideoResponse)
async def image_to_video(request: ImageToVideoRequest, generation_logger: GenerationLoggerDep) -> Any:
    return await ImageToVideoAgent(generation_logger=generation_logger).run(request)
