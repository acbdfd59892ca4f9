"""
Development server launcher.

Loads .env file and runs FastAPI with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn
from loguru import logger

if __name__ == "__main__":
    logger.info("Swim Practice Log development server")
    logger.info("API: http://localhost:8000")
    logger.info("Docs: http://localhost:8000/docs")
    logger.info("UI: streamlit run ui/app.py")

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
