import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from bh_studio.agent.errors import StudioError
from bh_studio.api.main import api_router
from bh_studio.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
)

if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=CORS_ALLOW_HEADERS,
    )


@app.exception_handler(StudioError)
async def studio_error_handler(request: Request, exc: StudioError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    logger.warning("%s %s rejected: %s", request.method, request.url.path, detail)
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {detail}"})


# Runs outside CORSMiddleware, so the allow-origin header is set here.
@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s crashed", request.method, request.url.path)
    headers = {}
    origin = request.headers.get("origin")
    if origin and ("*" in settings.BACKEND_CORS_ORIGINS or origin in settings.BACKEND_CORS_ORIGINS):
        headers["Access-Control-Allow-Origin"] = "*" if "*" in settings.BACKEND_CORS_ORIGINS else origin
    return JSONResponse(status_code=500, content={"error": "An unexpected error occurred"}, headers=headers)


app.include_router(api_router, prefix=settings.API_V1_STR)
