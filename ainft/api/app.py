"""FastAPI app, CORS, form page and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from ainft.api.state import AppState, get_state
from ainft.config import HUGGING_FACE_API_KEY, IMGBB_API_KEY, WEB_DIR

# Import routes after state to avoid circular imports
from ainft.api.routes import form, wallet

__all__ = ["app", "AppState", "get_state"]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not HUGGING_FACE_API_KEY:
        logger.warning("HUGGING_FACE_API_KEY not set; image generation will be rejected")
    if not IMGBB_API_KEY:
        logger.warning("IMGBB_API_KEY not set; image upload will be rejected")
    # No wallet is fatal: let startup fail.
    get_state().wallet.connect()
    yield


app = FastAPI(
    title="AI NFT Generator",
    description="Generate an image from a description, host it and mint it as an NFT",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(WEB_DIR / "index.html")


app.include_router(form.router, prefix="/api/form", tags=["form"])
app.include_router(wallet.router, prefix="/api/wallet", tags=["wallet"])
