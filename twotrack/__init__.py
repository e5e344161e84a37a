from twotrack.result import (
    AbsentPayloadError,
    ContractViolationError,
    Failure,
    IllegalStateError,
    Result,
    ResultError,
    Success,
    error,
    ok,
)
