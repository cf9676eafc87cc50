import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from bh_studio.agent.artifacts import ErrorResponse, PromptEngineerRequest, PromptEngineerResponse
from bh_studio.agent.errors import StudioError
from bh_studio.agent.prompt_engineer import PromptEngineerAgent

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/prompt-engineer", response_model=PromptEngineerResponse | ErrorResponse)
async def prompt_engineer(request: PromptEngineerRequest) -> Any:
    """
    Run the five-stage refinement pipeline. Failures are reported in the body
    with status 200 so the pipeline view can show them inline.
    """
    try:
        return await PromptEngineerAgent().run(request)
    except StudioError as e:
        logger.error("Prompt engineer error: %s", e.message)
        return JSONResponse(status_code=200, content={"error": e.message})
