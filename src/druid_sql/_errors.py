class SQLCompositionError(Exception):
    """Base for template composition errors."""


class InvalidSubstitutionError(SQLCompositionError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"invalid substitution: {value!r}"
            f" ({type(value).__name__}) is not a literal,"
            " parameter, nested template or function"
        )


class InvalidFunctionResultError(SQLCompositionError):
    def __init__(self, result: object) -> None:
        self.result = result
        super().__init__(
            f"invalid inline function result: {result!r}"
            f" ({type(result).__name__})"
        )


class TemplateShapeError(SQLCompositionError):
    def __init__(
        self,
        segments: int,
        values: int,
    ) -> None:
        self.segments = segments
        self.values = values
        super().__init__(
            f"expected {values + 1} segment(s) for"
            f" {values} value(s), got {segments}"
        )
