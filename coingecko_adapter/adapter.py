"""
Average price over a time range, reported as an oracle job result.

`create_request` validates a job request, fetches /market_chart/range from
CoinGecko and calls back exactly once with (status_code, payload).
"""
import logging
import math
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from .clients.coingecko import market_chart_range_config
from .clients.requester import Requester
from .errors import AdapterError, EmptyRangeError, UpstreamError, ValidationError
from .schemas import AdapterData, AverageResult, PriceRangeParams, errored, success
from .validator import Validator

logger = logging.getLogger(__name__)

Callback = Callable[[int, Dict[str, Any]], None]

validator = Validator(PriceRangeParams)

def custom_error(data: Any) -> bool:
    """True when the upstream payload asks to be retried."""
    return isinstance(data, dict) and data.get("Response") == "Error"

def average_price(prices: Optional[Sequence[Sequence[Any]]]) -> float:
    if not prices:
        raise EmptyRangeError("No prices returned for the requested range")
    try:
        total = sum(float(point[1]) for point in prices)
    except (TypeError, IndexError, ValueError) as e:
        raise UpstreamError(f"Malformed price point in upstream response: {e}") from e
    average = total / len(prices)
    if not math.isfinite(average):
        raise UpstreamError(f"Average price is not a finite number: {average}")
    return average

def create_request(input_data: Any, callback: Callback, requester: Optional[Requester] = None) -> None:
    try:
        validated = validator.validate(input_data)
    except ValidationError as e:
        logger.warning("Rejected job %s: %s", e.job_run_id, e)
        callback(e.status_code, errored(e.job_run_id, e, e.status_code))
        return

    job_run_id = validated.job_run_id
    params = validated.data
    config = market_chart_range_config(params.base, params.vs_currency, params.start, params.end)

    requester = requester or Requester()
    try:
        response = requester.request(config, custom_error)
        prices = response.data.get("prices") if isinstance(response.data, dict) else None
        average = average_price(prices)
    except AdapterError as e:
        logger.error("Job %s failed: %s", job_run_id, e)
        callback(500, errored(job_run_id, e))
        return

    data = AdapterData(
        prices=prices if params.with_details else None,
        result=AverageResult(average=average),
    )
    callback(response.status_code, success(job_run_id, response.status_code, data))

def execute(input_data: Any, requester: Optional[Requester] = None) -> Tuple[int, Dict[str, Any]]:
    """Run `create_request` and return what its callback received."""
    out: Dict[str, Any] = {}

    def callback(status_code: int, payload: Dict[str, Any]) -> None:
        out["status_code"] = status_code
        out["payload"] = payload

    create_request(input_data, callback, requester)
    return out["status_code"], out["payload"]
