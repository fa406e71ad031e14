class PhpEvaluationError(Exception):
    """Raised when a PHP file uses anything beyond literal data."""

    def __init__(self, message: str, *, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} (line {line}, column {column})")
