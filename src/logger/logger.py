"""
Logging module for the project
"""

import logging
import os

# Set PONG_LOG_LEVEL=DEBUG for score and input events
logging.basicConfig(
    level=os.environ.get("PONG_LOG_LEVEL", "INFO").upper(), format="%(message)s"
)
logger = logging.getLogger("pong")
