from fastapi import APIRouter

from bh_studio.api.routes import gems, image_tools, prompt_engineer, text_tools, utils, video

api_router = APIRouter()
api_router.include_router(utils.router)
api_router.include_router(image_tools.router, prefix="/functions", tags=["image-tools"])
api_router.include_router(text_tools.router, prefix="/functions", tags=["text-tools"])
api_router.include_router(prompt_engineer.router, prefix="/functions", tags=["prompt-engineer"])
api_router.include_router(video.router, prefix="/functions", tags=["video"])
api_router.include_router(gems.router, prefix="/gems", tags=["gems"])
