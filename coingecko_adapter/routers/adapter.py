import json
from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from ..adapter import execute

router = APIRouter(tags=["adapter"])

@router.post("/")
async def run_job(request: Request):
    """
    Oracle job endpoint: {"id": ..., "data": {"base", "vs_currency", "start", "end", "withDetails"}}.
    Responds with the job envelope and the status code the adapter reported.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw) if raw else None
    except ValueError:
        # reported by the validator as a non-object input
        payload = None
    status_code, data = await run_in_threadpool(execute, payload)
    return JSONResponse(status_code=status_code, content=data)
