"""Exception types raised by jsonwriter."""

from __future__ import annotations


class SinkWriteError(OSError):
    """The output sink failed while a value was being written.

    The original sink exception is available as ``__cause__``. Output emitted
    before the failure stays in the sink; nothing is rolled back.
    """

    def __init__(self, message: str, *, fragment: str = ""):
        super().__init__(message)
        self.fragment = fragment
