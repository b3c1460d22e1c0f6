"""FastAPI application - generation, image serving and health endpoints."""

import json
import logging
import resource
import sys
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from fitnosh_generator.config import Settings, get_layout_config, get_settings
from fitnosh_generator.imaging import GeminiImageClient, ImageModelClient
from fitnosh_generator.media import Compositor
from fitnosh_generator.models import (
    GenerateImageResponse,
    ImageEntry,
    ImageListResponse,
    OverlayLayout,
)
from fitnosh_generator.persistence import create_image_store, unique_id
from fitnosh_generator.services import ImageService, MealImageService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

ENDPOINTS = {
    "POST /generate-image": "Generate Instagram image with meal data",
    "GET /images": "List all generated images",
    "GET /images/{filename}": "View specific image",
    "GET /health": "Detailed health check",
    "GET /ping": "Keep-alive check",
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _max_rss_mb() -> int:
    """Peak resident set size in MB. ru_maxrss is KB on Linux, bytes on macOS."""
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    divisor = 1024 * 1024 if sys.platform == "darwin" else 1024
    return round(rss / divisor)


def _base_url(request: Request, settings: Settings) -> str:
    if settings.public_base_url:
        return settings.public_base_url.rstrip("/")
    return str(request.base_url).rstrip("/")


def create_app(
    settings: Settings | None = None,
    image_client: ImageModelClient | None = None,
) -> FastAPI:
    """Build the application. Arguments override config-derived dependencies."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire services at startup."""
        store = create_image_store(settings)
        layout = OverlayLayout.from_config(get_layout_config(settings.layout_config_dir))
        client = image_client or GeminiImageClient(
            api_key=settings.google_api_key,
            model=settings.image_model,
        )
        if not client.is_configured:
            logger.warning("GOOGLE_API_KEY is not set; image generation will fail")
        app.state.settings = settings
        app.state.store = store
        app.state.meal_images = MealImageService(
            ImageService(
                client,
                max_attempts=settings.max_attempts,
                retry_delay=settings.retry_delay_seconds,
            ),
            Compositor(layout, settings.logo_path),
            store,
        )
        app.state.started_at = time.monotonic()
        logger.info("Serving images from %s", store.directory.resolve())
        yield

    app = FastAPI(
        title="Fitnosh Instagram Generator",
        description="AI food photos branded with logo and dish labels",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    def uptime() -> float:
        return round(time.monotonic() - app.state.started_at, 3)

    @app.get("/")
    async def root() -> dict:
        """Service banner."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.service_version,
            "uptime": uptime(),
            "timestamp": _now_iso(),
            "endpoints": ENDPOINTS,
        }

    @app.get("/health")
    async def health() -> dict:
        """Detailed health for monitoring."""
        return {
            "status": "healthy",
            "timestamp": _now_iso(),
            "uptime": uptime(),
            "service": settings.service_name,
            "version": settings.service_version,
            "environment": settings.environment,
            "memory": {"max_rss": f"{_max_rss_mb()} MB"},
            "api_key_configured": settings.api_key_configured,
            "logo_file_exists": settings.logo_path.is_file(),
            "ready": True,
        }

    @app.get("/ping")
    async def ping() -> dict:
        """Keep-alive check."""
        return {"status": "pong", "timestamp": _now_iso(), "uptime": uptime()}

    @app.post("/generate-image", response_model=GenerateImageResponse)
    async def generate_image(request: Request):
        """
        Generate a branded meal image. Body is a meal record or a list of
        them (first used); unreadable bodies fall back to the default meal.
        """
        raw_body = await request.body()
        try:
            payload = json.loads(raw_body) if raw_body else None
        except ValueError as e:
            logger.warning("Invalid meal data, using defaults: %s", e)
            payload = None
        try:
            generated = await request.app.state.meal_images.generate(payload)
        except Exception as e:
            logger.exception("Error generating image: %s", e)
            return JSONResponse(
                status_code=500,
                content={"error": "Error generating image", "details": str(e)},
            )
        link = (
            f"{_base_url(request, settings)}/images/{generated.filename}"
            f"?v={time.time_ns() // 1_000_000}"
        )
        return GenerateImageResponse(
            imagePath=generated.filename,
            imageUrl=link,
            imageDisplayUrl=link,
            directLink=link,
            timestamp=_now_iso(),
            uniqueId=unique_id(generated.filename),
        )

    @app.get("/images", response_model=ImageListResponse)
    def list_images(request: Request) -> ImageListResponse:
        """Retained generated images, newest first."""
        base = _base_url(request, settings)
        images = [
            ImageEntry(
                filename=img.filename,
                url=f"{base}/images/{img.filename}",
                created=img.created,
                size=img.size,
            )
            for img in request.app.state.store.list_images()
        ]
        return ImageListResponse(images=images, total=len(images))

    @app.get("/images/{filename}")
    def get_image(filename: str, request: Request):
        """Raw PNG bytes, never cached."""
        path = request.app.state.store.path_for(filename)
        if path is None:
            return JSONResponse(
                status_code=404,
                content={"error": "Image not found", "filename": filename},
            )
        return FileResponse(path, media_type="image/png", headers=NO_CACHE_HEADERS)

    return app


app = create_app()
