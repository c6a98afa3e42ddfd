"""
Career Match API Entry Point

Use this file for deployment:
  uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging

from app.config import load_settings

logging.basicConfig(
    level=load_settings().log_level,
    format='%(asctime)s - %(levelname)s - %(message)s'
)

from api_server import app  # noqa: E402

logger = logging.getLogger(__name__)
logger.info("Career Match API ready")


# For local development
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
