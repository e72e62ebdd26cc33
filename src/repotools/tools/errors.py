"""Errors raised inside tool handlers.

None of these escape a handler: RepositoryTool.handler turns them into the
{"error": ...} payload. An invalid regex is deliberately not in this list;
grep falls back to literal matching instead.
"""


class RepositoryToolError(Exception):
    """Base class for failures reported back to the calling agent."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ArgumentValidationError(RepositoryToolError):
    """A required argument is missing or empty, or has the wrong type."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class FileLookupError(RepositoryToolError, LookupError):
    """The requested file is not in the snapshot."""

    def __init__(self, file_name: str, suggestions: list[str] | None = None):
        self.file_name = file_name
        self.suggestions = list(suggestions or [])
        if self.suggestions:
            message = f'File "{file_name}" not found. Did you mean: {", ".join(self.suggestions)}?'
        else:
            message = f'File "{file_name}" not found in repository.'
        super().__init__(message)


class UpstreamSearchError(RepositoryToolError):
    """The external semantic query function failed."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Search failed: {str(cause) or type(cause).__name__}")
