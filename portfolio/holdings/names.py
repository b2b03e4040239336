"""
Ticker name lookup — fills display names for newly entered tickers.

1. Static table of commonly held Japanese stocks
2. Optional company profile API (only when FMP_API_KEY is configured)

"No name found" is returned as None; callers fall back to the ticker.
"""
import logging
from typing import Dict, Optional

import requests

from config.settings import API_TIMEOUT, FMP_API_KEY, FMP_BASE_URL

logger = logging.getLogger(__name__)


STOCK_DB: Dict[str, str] = {
    "7203": "トヨタ自動車",
    "8306": "三菱UFJフィナンシャルG",
    "9432": "日本電信電話",
    "9984": "ソフトバンクグループ",
    "2914": "日本たばこ産業",
    "8058": "三菱商事",
    "8316": "三井住友フィナンシャルG",
    "9433": "KDDI",
    "6758": "ソニーグループ",
    "6861": "キーエンス",
}


class ProfileClient:
    """Company profile client. One request per lookup; failures mean no name."""

    def __init__(self, api_key: str = FMP_API_KEY, base_url: str = FMP_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url

    def get_company_name(self, symbol: str) -> Optional[str]:
        """Company name from the profile endpoint, or None."""
        try:
            resp = requests.get(
                f"{self.base_url}/profile",
                params={"symbol": symbol, "apikey": self.api_key},
                timeout=API_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Profile request failed for {symbol}: {e}")
            return None

        if resp.status_code != 200:
            logger.warning(f"Profile API error {resp.status_code} for {symbol}")
            return None

        data = resp.json()
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            return None
        return data.get("companyName") or None


def default_client() -> Optional[ProfileClient]:
    """Profile client when an API key is configured, else None."""
    if not FMP_API_KEY:
        return None
    return ProfileClient()


def lookup_name(ticker: str, client: Optional[ProfileClient] = None) -> Optional[str]:
    """Display name for `ticker`, or None when no name is known."""
    ticker = (ticker or "").strip().upper()
    if not ticker:
        return None

    if ticker in STOCK_DB:
        return STOCK_DB[ticker]

    if client is None:
        return None

    try:
        return client.get_company_name(ticker)
    except ValueError as e:
        # malformed JSON payload
        logger.warning(f"Name lookup failed for {ticker}: {e}")
        return None


def lookup_with_profile(ticker: str) -> Optional[str]:
    """lookup_name with the configured profile client, if any."""
    return lookup_name(ticker, default_client())
