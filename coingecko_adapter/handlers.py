"""AWS Lambda entry points."""
import json
import logging
from typing import Any, Dict

from .adapter import execute
from .config import settings

logging.getLogger().setLevel(settings.log_level)

def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Direct invocation: the event is the job request, the result is the envelope."""
    _, payload = execute(event)
    return payload

def handler_v2(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """API Gateway proxy integration: the job request is the JSON-encoded body."""
    try:
        input_data = json.loads(event.get("body") or "null")
    except (TypeError, ValueError):
        # reported by the validator as a non-object input
        input_data = None
    status_code, payload = execute(input_data)
    return {
        "statusCode": status_code,
        "body": json.dumps(payload),
        "isBase64Encoded": False,
    }
