import pytest

from twotrack.result import Result


def pytest_configure():
    pytest.OK_VALUE = "ok"
    pytest.ERROR_VALUE = "error"
    pytest.BAD_IDS = [2, 5]


@pytest.fixture
def ok_result() -> Result[str, str]:
    return Result.Ok(pytest.OK_VALUE)


@pytest.fixture
def error_result() -> Result[str, str]:
    return Result.Error(pytest.ERROR_VALUE)
