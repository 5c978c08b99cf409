"""FastAPI application entrypoint. No business logic; only wiring and error handling."""

from dotenv import load_dotenv

load_dotenv()

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api import router as api_router
from app.core.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(
    title="MythoMaps API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.include_router(api_router, prefix=settings.API_PREFIX)

AVAILABLE_ROUTES = ["/", f"{settings.API_PREFIX}/health", f"{settings.API_PREFIX}/auth"]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get a short message naming the bad fields; submitted values are never echoed."""
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    message = "Invalid request body"
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"message": message})


@app.exception_handler(status.HTTP_404_NOT_FOUND)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Route not found",
            "message": f"The route {request.url.path} does not exist",
            "availableRoutes": AVAILABLE_ROUTES,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected faults and answer with a generic 500; details only in dev."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content: dict[str, str] = {"message": "Internal Server Error"}
    if not settings.is_production:
        content["error"] = type(exc).__name__
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


@app.get("/")
def root() -> dict[str, object]:
    """Root route; minimal payload for discovery."""
    return {
        "message": "MythoMaps API is running",
        "version": app.version,
        "status": "active",
        "endpoints": {
            "auth": f"{settings.API_PREFIX}/auth",
            "health": f"{settings.API_PREFIX}/health",
        },
    }
