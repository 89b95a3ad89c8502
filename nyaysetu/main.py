import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from nyaysetu.core.config import settings
from nyaysetu.core.errors import NyaySetuError
from nyaysetu.api.routers.summarize import router as summarize_router
from nyaysetu.api.routers.translate import router as translate_router
from nyaysetu.api.routers.chat import router as chat_router

logging.basicConfig(
    level=getattr(logging, (settings.log_level or "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="NyaySetu Legal Summarization API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(summarize_router, prefix=settings.api_prefix)
app.include_router(translate_router, prefix=settings.api_prefix)
app.include_router(chat_router, prefix=settings.api_prefix)


@app.exception_handler(NyaySetuError)
def handle_service_error(request: Request, exc: NyaySetuError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": detail})


def _cors_headers(request: Request) -> dict:
    """Allow-origin header matching what CORSMiddleware would have sent."""
    if "*" in settings.cors_origins:
        return {"Access-Control-Allow-Origin": "*"}
    origin = request.headers.get("origin")
    if origin and origin in settings.cors_origins:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


# Starlette runs this handler outside CORSMiddleware, so the headers are added here
@app.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": str(exc) or "Unknown error occurred"},
        headers=_cors_headers(request),
    )


@app.get("/health/live")
def live():
    return {"ok": True}


def run():
    import uvicorn

    uvicorn.run("nyaysetu.main:app", host=settings.host, port=settings.port)
