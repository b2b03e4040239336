"""
Dividend income tracker configuration
"""
import os
from pathlib import Path
from dotenv import load_dotenv

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# Load .env automatically (API keys and other private settings)
load_dotenv(PROJECT_ROOT / ".env")

# Data directory
DATA_DIR = Path(os.environ.get("INCOME_DATA_DIR", PROJECT_ROOT / "data"))

# Holdings store (one JSON array of holding records)
HOLDINGS_FILE = DATA_DIR / "dividend_app_data.json"

# Company profile lookup (optional, only used to fill display names)
FMP_API_KEY = os.environ.get("FMP_API_KEY", "")
FMP_BASE_URL = "https://financialmodelingprep.com/stable"

# API call settings
API_TIMEOUT = 10

# Report settings
TREND_DATE_FORMAT = "%Y/%m/%d"
CURRENCY_SYMBOL = "¥"
