class SiteError(Exception):
    """Base class for failures that abort a fetch or generate run."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InputDataError(SiteError):
    exit_code = 2

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class DataConsistencyError(InputDataError):
    """Cross-record problems: orphaned hotels, colliding slugs."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        summary = f"{len(problems)} data consistency problem(s): " + "; ".join(problems)
        super().__init__(summary)


class OutputWriteError(SiteError):
    exit_code = 3

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class FetchError(SiteError):
    """Live discovery could not run (missing API key, unreachable service)."""

    exit_code = 4

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
