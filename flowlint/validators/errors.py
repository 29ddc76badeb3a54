"""Operational failures raised during validation."""

from ..errors import FlowlintError


class ValidationTimeout(FlowlintError):
    """Raised when validation exceeds its wall-clock budget."""

    def __init__(self, timeout_ms: float, stage: str, elapsed_ms: float | None = None):
        self.timeout_ms = timeout_ms
        self.stage = stage
        self.elapsed_ms = elapsed_ms
        message = f"Validation exceeded its {timeout_ms:g} ms budget during {stage}"
        if elapsed_ms is not None:
            message += f" (elapsed {elapsed_ms:.1f} ms)"
        super().__init__(message)
