"""
Configuration & Path Management
===============================
Central registry for file paths and defaults.

Handles the PyInstaller case (sys._MEIPASS) so the bundled sample data is
found both in development and when frozen into an executable.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_CUSTOMERS_PATH (str): Absolute path to the customer data file.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/customerapp/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_CUSTOMERS_PATH: str = os.path.join(ASSETS_PATH, "customers.json")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

# Log level name for setup_logging(); override with CUSTOMERAPP_LOG_LEVEL=DEBUG
LOG_LEVEL: str = os.environ.get("CUSTOMERAPP_LOG_LEVEL", "INFO").upper()
