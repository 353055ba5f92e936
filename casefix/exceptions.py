"""Custom exceptions for casefix."""


class CasefixError(Exception):
    """Base exception for casefix."""
    pass


class MalformedRecordError(CasefixError):
    """A record line has no field delimiter. Fatal to the whole batch."""

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"null value for entry on line {line_number}, "
            "make sure there are no empty lines in your data file"
        )


class OverrideTableError(CasefixError):
    """Invalid override table extension."""
    pass
