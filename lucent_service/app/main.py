"""
Lucent Service v1.0.0
Backend for the Lucent dashboard: style insight, identity alignment,
seasonal content compass, outfit visualizer and gentle cadence planner.

API ROUTES:
-----------
- /ai/style-insight         - Visual clusters + thematic tags from a photo
- /ai/identity-alignment    - Mood/content alignment score
- /ai/content-compass       - Seasonal theme + post structure
- /ai/outfit-visualizer     - Garment labels + per-garment renders
- /ai/cadence               - Mood/energy posting suggestion (no provider call)
- /ai/growth-trail, /ai/merch-shelf - Static dashboard content
- /health, /metrics         - Health and monitoring
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lucent_service import __version__
from lucent_service.app.routes import router
from lucent_service.config import get_settings, get_all_configs_dict, is_role_configured, LLMRole
from lucent_service.observability import is_logging_enabled

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info(f"Lucent Service v{__version__} Starting...")
    logger.info("=" * 50)

    settings = get_settings()

    configs = get_all_configs_dict()
    logger.info(f"Analyst LLM: {configs['analyst']['provider']}/{configs['analyst']['model']}")
    logger.info(f"Image LLM: {configs['image']['provider']}/{configs['image']['model']}")

    if not is_role_configured(LLMRole.ANALYST):
        logger.warning("Analyst provider API key missing - analysis features will fail")
    if not is_role_configured(LLMRole.IMAGE):
        logger.warning("Image provider API key missing - outfit renders will be empty")

    timeout = settings.timeout
    logger.info(f"Provider timeout: {f'{timeout}s' if timeout else 'disabled'}")
    logger.info(f"Logging: {'enabled' if is_logging_enabled() else 'disabled'}")

    logger.info("✓ Service ready! http://localhost:8000")
    logger.info("=" * 50)

    yield

    logger.info("Service shutting down...")


app = FastAPI(
    title="Lucent Service",
    description="Style and content reflection dashboard backend",
    version=__version__,
    lifespan=lifespan
)

# ============================================================================
# MIDDLEWARE
# ============================================================================
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("lucent_service.app.main:app", host="0.0.0.0", port=8000)
