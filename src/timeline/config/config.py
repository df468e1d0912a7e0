import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from a .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Config:
    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    STATIC_DIR: str = os.getenv("STATIC_DIR", str(PACKAGE_DIR / "static"))

    # Storage settings
    DB_PATH: str = os.getenv("DB_PATH", "timeline.db")

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
