"""Main application module for the Travesia blog."""
from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

# Constants
PROJECT_ROOT = Path(__file__).resolve().parent
LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_PORT = 5000
DEFAULT_HOST = "127.0.0.1"

LOG_DIR.mkdir(exist_ok=True)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.FileHandler(LOG_DIR / 'travesia.log'),
        logging.StreamHandler()
    ]
)

logger = logging.getLogger("travesia")

# Load environment variables before the blog package reads its settings
load_dotenv(os.getenv("TRAVESIA_DOTENV", ".env"))

import blog  # noqa: E402
from app_utils import get_env  # noqa: E402

# Initialize Flask app
app = Flask(__name__, template_folder='templates', static_folder='static')
CORS(app)

NOTION_API_KEY = get_env("NOTION_API_KEY", required=True)
NOTION_DATABASE_ID = get_env("NOTION_DATABASE_ID", required=True)

# Register routes
from site_routes import register_routes  # noqa: E402
register_routes(app, blog.SETTINGS)

logger.info(
    "Travesia ready: %d categories",
    len(blog.SETTINGS.categories),
)

__all__ = ["app"]
