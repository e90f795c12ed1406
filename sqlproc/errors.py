"""Exception hierarchy for query processing."""


class QueryError(RuntimeError):
    """Base class for every error raised while handling a query."""


class QuerySyntaxError(QueryError):
    """The query text could not be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Syntax error: {message}")


class SemanticError(QueryError):
    """The query parsed but refers to something invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Semantic error: {message}")


class QueryIOError(QueryError):
    """Reading or writing data for a query failed."""

    def __init__(self, message: str) -> None:
        super().__init__(f"I/O error: {message}")