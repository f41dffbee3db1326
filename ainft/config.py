"""Configuration: env, RPC endpoint, remote services, mint fee."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of ainft package)
PACKAGE_DIR = Path(__file__).resolve().parent
BASE_DIR = PACKAGE_DIR.parent

# Load .env from project root so HUGGING_FACE_API_KEY etc. are set
load_dotenv(BASE_DIR / ".env")

WEB_DIR = PACKAGE_DIR / "web"
NFT_ABI_PATH = PACKAGE_DIR / "abis" / "NFT.json"
ADDRESS_BOOK_PATH = Path(os.getenv("AINFT_ADDRESS_BOOK", str(PACKAGE_DIR / "address_book.json")))

# API
API_HOST = os.getenv("AINFT_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("AINFT_API_PORT", "8000"))

# Wallet: JSON-RPC node; with no private key the node's own accounts sign
WALLET_RPC_URL = os.getenv("AINFT_RPC_URL", "http://127.0.0.1:8545")
WALLET_PRIVATE_KEY = os.getenv("AINFT_PRIVATE_KEY", "")

# Remote services (keys are not validated; a bad key shows up as a 401/403)
HUGGING_FACE_API_KEY = os.getenv("HUGGING_FACE_API_KEY", "")
IMGBB_API_KEY = os.getenv("IMGBB_API_KEY", "")
INFERENCE_URL = os.getenv(
    "AINFT_INFERENCE_URL",
    "https://api-inference.huggingface.co/models/stabilityai/stable-diffusion-2-1",
)
UPLOAD_URL = os.getenv("AINFT_UPLOAD_URL", "https://api.imgbb.com/1/upload")

# Mint fee in ether, converted to wei at call time
MINT_FEE_ETH = os.getenv("AINFT_MINT_FEE_ETH", "1")

# Model cold starts can take a while with wait_for_model
HTTP_TIMEOUT_SEC = float(os.getenv("AINFT_HTTP_TIMEOUT_SEC", "120"))
TX_TIMEOUT_SEC = float(os.getenv("AINFT_TX_TIMEOUT_SEC", "120"))
