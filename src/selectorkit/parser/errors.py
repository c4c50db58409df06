"""Parser error types."""


class ParseError(Exception):
    """Raised when selector text falls outside the supported grammar."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def location(self) -> str:
        if self.column is None:
            return ""
        return f"column {self.column}"
