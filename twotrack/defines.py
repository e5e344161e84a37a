"""Shared constants and type descriptions for result utilities"""


from typing import Callable, Hashable, TypeVar

from twotrack.result import Result

T = TypeVar("T")
ID = Hashable  # identifies one call in an exploration, e.g. a sample id
Outcome = Result[T, str]  # a result whose error is a formatted exception
Attempt = Callable[[ID], T]  # a function explored over many ids

EXCEPTIONS = (  # the exceptions captured into Failures
    IndexError,
    KeyError,
    ValueError,
    OSError,
    RuntimeError,
)

ID_COL = "id"
RESULT_COL = "result"
ERROR_COL = "error"
