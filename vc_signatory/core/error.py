"""Common exception classes."""

import re


def _one_line(exc: BaseException) -> str:
    """Return the first argument of an exception on a single line."""
    text = str(exc.args[0]).strip() if exc.args else exc.__class__.__name__
    return re.sub(r"\n\s*", ". ", text).strip()


class BaseError(Exception):
    """Generic exception class which other exceptions should inherit from."""

    def __init__(self, *args, error_code: str = None, **kwargs):
        """Initialize a BaseError instance."""
        super().__init__(*args, **kwargs)
        self.error_code = error_code or None

    @property
    def message(self) -> str:
        """Accessor for the error message."""
        return str(self.args[0]).strip() if self.args else ""

    @property
    def roll_up(self) -> str:
        """
        Accessor for the messages of this error and its causes on one line.

        For display: log lines truncate after newline.
        """
        parts = [_one_line(self)]
        err = self.__cause__
        while err:
            parts.append(_one_line(err))
            err = err.__cause__
        return f"{'. '.join(parts)}."
