"""Schema-related exceptions."""

from ..errors import FlowlintError


class SchemaLoadError(FlowlintError):
    """Raised when an IR document cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(FlowlintError):
    """Raised when an IR document does not match the process schema."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
