"""FastAPI application setup"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from eunoia import __version__
from eunoia import config
from eunoia.api.routes import router, limiter
from eunoia.config import validate_config, LOG_LEVEL, API_HOST, API_PORT
from eunoia.exceptions import EunoiaError, ValidationError, AchievementNotFoundError

# Configure logging
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, LOG_LEVEL, logging.INFO)
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for FastAPI application"""
    # Startup
    logger.info("Validating configuration...")
    validate_config()
    logger.info("Starting API server...")

    yield

    # Shutdown
    logger.info("Shutting down API server...")


def create_api_application() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Eunoia API",
        description="Achievement and streak engine for the Eunoia journal",
        version=__version__,
        lifespan=lifespan
    )

    # Browser access for the journal client
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    logger.info(
        f"CORS origins: {config.CORS_ORIGINS}; "
        f"rate limiting {'enabled' if limiter.enabled else 'disabled'}"
    )

    # Include routes
    app.include_router(router)

    @app.exception_handler(EunoiaError)
    async def eunoia_exception_handler(request: Request, exc: EunoiaError):
        if isinstance(exc, ValidationError):
            status_code = status.HTTP_400_BAD_REQUEST
        elif isinstance(exc, AchievementNotFoundError):
            status_code = status.HTTP_404_NOT_FOUND
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request, exc):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "detail": str(exc)}
        )

    logger.info("FastAPI application created")

    return app


app = create_api_application()


def main() -> None:
    """Run the API server with uvicorn"""
    import uvicorn

    uvicorn.run("eunoia.api.server:app", host=API_HOST, port=API_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
