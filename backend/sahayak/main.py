import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sahayak.api import content, health, knowledge, passages, questions, visual_aids, worksheets
from sahayak.core.config import get_settings
from sahayak.core.errors import UpstreamServiceError, ValidationError

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("sahayak.main")

app = FastAPI(
    title=settings.app_name,
    description="AI teaching assistant for multi-grade Indian classrooms",
    version=health.VERSION,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(dict.fromkeys([settings.frontend_url, *settings.allowed_origins])),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("[%s] rejected: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"success": False, "error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    fields = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
    fields = [f for f in fields if f]
    message = "Invalid request body"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    logger.info("[%s] rejected: %s", request.url.path, message)
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.exception_handler(UpstreamServiceError)
async def upstream_error_handler(request: Request, exc: UpstreamServiceError):
    logger.error("[%s] upstream failure: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})


# Include routers
app.include_router(health.router)
app.include_router(content.router)
app.include_router(questions.router)
app.include_router(knowledge.router)
app.include_router(worksheets.router)
app.include_router(visual_aids.router)
app.include_router(passages.router)


@app.get("/")
async def root():
    return {
        "name": settings.app_name,
        "docs": "/docs",
        "health": "/api/health",
    }
