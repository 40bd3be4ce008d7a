from typing import Dict
from urllib.parse import quote

from ..config import settings
from .requester import RequestConfig

UA = {"User-Agent": "coingecko-range-adapter/1.0"}

def _headers() -> Dict[str, str]:
    headers = dict(UA)
    if settings.coingecko_api_key:
        # CoinGecko v3 Pro header (if you have a key)
        headers["x-cg-pro-api-key"] = settings.coingecko_api_key
    return headers

def market_chart_range_config(coin: str, vs_currency: str, start: str, end: str) -> RequestConfig:
    """
    GET /coins/{id}/market_chart/range for one coin.
    `start` and `end` are forwarded unchanged as `from` and `to`.
    """
    base_url = settings.coingecko_base_url.rstrip("/")
    url = f"{base_url}/coins/{quote(coin.lower(), safe='')}/market_chart/range"
    params = {"vs_currency": vs_currency, "from": start, "to": end}
    return RequestConfig(method="GET", url=url, params=params, headers=_headers())
