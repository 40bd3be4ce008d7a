from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import DEFAULT_JOB_RUN_ID, ValidationError

@dataclass
class Validated:
    job_run_id: Any
    data: BaseModel

def _describe(exc: PydanticValidationError) -> str:
    messages = []
    for err in exc.errors():
        name = ".".join(str(part) for part in err["loc"])
        if err["type"] == "missing":
            messages.append(f"Required parameter not supplied: {name}")
        else:
            messages.append(f"Invalid value for parameter {name}: {err['msg']}")
    return "; ".join(messages)

class Validator:
    """
    Validate a job request of the shape {"id": ..., "data": {...}}.
    The job id is resolved first so that a rejection can still be reported
    against it; parameters are resolved through the aliases of `params_model`.
    """

    def __init__(self, params_model: Type[BaseModel]):
        self.params_model = params_model

    def validate(self, input_data: Any) -> Validated:
        if not isinstance(input_data, Mapping):
            raise ValidationError("Input must be a JSON object")

        job_run_id = input_data.get("id") or DEFAULT_JOB_RUN_ID

        data = input_data.get("data")
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValidationError("Input data must be a JSON object", job_run_id)

        try:
            params = self.params_model.model_validate(dict(data))
        except PydanticValidationError as e:
            raise ValidationError(_describe(e), job_run_id) from e
        return Validated(job_run_id=job_run_id, data=params)
