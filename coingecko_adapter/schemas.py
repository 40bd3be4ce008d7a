from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictStr
from typing import Any, List, Optional

class PriceRangeParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    base: StrictStr = Field(
        min_length=1,
        validation_alias=AliasChoices("base", "coin", "cid", "symbol", "sym"),
        description="The coin id of the currency to query",
    )
    vs_currency: StrictStr = Field(
        min_length=1,
        validation_alias=AliasChoices("vs_currency", "convert", "quote", "market"),
        description="The symbol of the currency to convert to",
    )
    start: StrictStr = Field(
        min_length=1,
        validation_alias=AliasChoices("start", "from"),
        description="Timestamp (Unix or ISO 8601) to start returning quotes for",
    )
    end: StrictStr = Field(
        min_length=1,
        validation_alias=AliasChoices("end", "to"),
        description="Timestamp (Unix or ISO 8601) to stop returning quotes for",
    )
    with_details: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("withDetails", "average"),
        description="Whether price details should be returned",
    )

class AverageResult(BaseModel):
    average: float

class AdapterData(BaseModel):
    # [timestamp, price] pairs exactly as the upstream sent them
    prices: Optional[List[Any]] = None
    result: AverageResult

class ErrorDetail(BaseModel):
    name: str
    message: str

class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    job_run_id: Any = Field(alias="jobRunID")
    status: str
    status_code: int = Field(alias="statusCode")

class SuccessEnvelope(_Envelope):
    status: str = "success"
    data: AdapterData
    result: AverageResult

class ErrorEnvelope(_Envelope):
    status: str = "errored"
    error: ErrorDetail

def success(job_run_id: Any, status_code: int, data: AdapterData) -> dict:
    envelope = SuccessEnvelope(
        job_run_id=job_run_id, status_code=status_code, data=data, result=data.result
    )
    return envelope.model_dump(by_alias=True, exclude_none=True)

def errored(job_run_id: Any, error: Exception, status_code: int = 500) -> dict:
    detail = ErrorDetail(name=type(error).__name__, message=str(error) or type(error).__name__)
    envelope = ErrorEnvelope(job_run_id=job_run_id, status_code=status_code, error=detail)
    return envelope.model_dump(by_alias=True, exclude_none=True)
