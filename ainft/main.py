"""Entry: start the API server that serves the form page."""
import logging
import uvicorn

from ainft.config import API_HOST, API_PORT

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    uvicorn.run(
        "ainft.api.app:app",
        host=API_HOST,
        port=API_PORT,
    )
