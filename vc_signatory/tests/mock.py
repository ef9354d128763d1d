"""Mock helpers shared by the test suites."""

from unittest.mock import AsyncMock, MagicMock


def CoroutineMock(*args, **kwargs):
    """Return an AsyncMock that returns a MagicMock, unless return_value is set."""
    if "return_value" in kwargs:
        return AsyncMock(*args, **kwargs)
    return AsyncMock(*args, **kwargs, return_value=MagicMock())


def mock_credential_signer(signed: str = "signed") -> MagicMock:
    """Return a credential signer whose `sign` coroutine returns `signed`."""
    return MagicMock(sign=CoroutineMock(return_value=signed))


__all__ = ["AsyncMock", "CoroutineMock", "MagicMock", "mock_credential_signer"]
