import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
# Find .env file in project root (parent of api/, wellness/, etc.)
project_root = Path(__file__).parent
load_dotenv(project_root / '.env')

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

API_TITLE = os.getenv("API_TITLE", "Wellness Score API")

# Comma separated; "*" allows every origin (development)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Minimum wellness score a product should reach to pass its category
CATEGORY_THRESHOLD = int(os.getenv("CATEGORY_THRESHOLD", "60"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for an entry point (API, CLI)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
