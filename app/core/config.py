"""Centralized configuration for the application.

Loads environment variables, sets defaults, and exposes constants
used by the entry point.
"""

import os

from dotenv import load_dotenv

from src.visuals.core.constants import title

load_dotenv("env/.env")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DATA_PATH = os.getenv("DATA_PATH", "treasuries_cleaned.csv")
CHART_TITLE = os.getenv("CHART_TITLE", title)

# Headless export; when OUTPUT_PATH is unset the chart opens in a window
OUTPUT_PATH = os.getenv("OUTPUT_PATH")
EXPORT_CYCLES = int(os.getenv("EXPORT_CYCLES", "1"))
EXPORT_FPS = int(os.getenv("EXPORT_FPS", "25"))
