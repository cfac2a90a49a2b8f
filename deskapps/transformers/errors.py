"""Errors raised while decoding flat file records."""


class RecordFormatError(Exception):
    """Raised when a line cannot be decoded into a record."""

    def __init__(self, line: str, reason: str):
        self.line = line
        self.reason = reason
        super().__init__(f"Malformed record {line!r}: {reason}")
