DEFAULT_JOB_RUN_ID = "1"


class AdapterError(Exception):
    status_code = 500


class ValidationError(AdapterError):
    """Input rejected before any network call is made."""

    status_code = 400

    def __init__(self, message: str, job_run_id=DEFAULT_JOB_RUN_ID):
        super().__init__(message)
        self.job_run_id = job_run_id


class UpstreamError(AdapterError):
    """Terminal failure talking to, or reading from, the price API."""


class EmptyRangeError(UpstreamError):
    pass
