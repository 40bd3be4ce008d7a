import httpx
import json
import math
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, Field

from ..config import settings
from ..errors import UpstreamError

logger = logging.getLogger(__name__)

CustomError = Callable[[Any], bool]

class RequestConfig(BaseModel):
    method: str = "GET"
    url: str
    params: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)

@dataclass
class UpstreamResponse:
    status_code: int
    data: Any

def _no_custom_error(data: Any) -> bool:
    return False

def _retry_after(r: httpx.Response, default: float) -> float:
    try:
        value = float(r.headers.get("Retry-After", default))
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return min(max(value, 0.0), settings.max_retry_after)

class Requester:
    """
    Outbound HTTP with retries.

    An attempt is retried when the request fails, the status is not 2xx, the
    body is not JSON, or the body signals an error (a truthy "error" key or
    `custom_error(body)`). After `retries` attempts the last failure is raised
    as UpstreamError.
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        delay: Optional[float] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.retries = max(1, settings.retries if retries is None else retries)
        self.delay = settings.retry_delay if delay is None else delay
        self.timeout = settings.request_timeout if timeout is None else timeout
        self._transport = transport

    def request(self, config: RequestConfig, custom_error: Optional[CustomError] = None) -> UpstreamResponse:
        custom_error = custom_error or _no_custom_error
        last_err: Optional[Exception] = None
        for attempt in range(1, self.retries + 1):
            delay = self.delay
            try:
                with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                    r = client.request(config.method, config.url, params=config.params, headers=config.headers)
                if r.status_code == 429:
                    delay = _retry_after(r, self.delay)
                r.raise_for_status()
                data = r.json()
            except (httpx.HTTPError, ValueError) as e:
                last_err = e
                logger.warning("Attempt %d/%d to %s failed: %s", attempt, self.retries, config.url, e)
            else:
                if isinstance(data, dict) and (data.get("error") or custom_error(data)):
                    last_err = UpstreamError(f"Could not retrieve valid data: {json.dumps(data)}")
                    logger.warning("Attempt %d/%d to %s returned an error payload", attempt, self.retries, config.url)
                else:
                    logger.info("Received response from %s (%d)", config.url, r.status_code)
                    return UpstreamResponse(status_code=r.status_code, data=data)

            if attempt < self.retries:
                time.sleep(delay)

        logger.error("Giving up on %s after %d attempts", config.url, self.retries)
        raise UpstreamError(f"Request to {config.url} failed: {last_err}") from last_err
