"""Base exception for flowlint."""


class FlowlintError(Exception):
    """Base class for failures that prevent a process from being analyzed.

    Structural defects found in a process are never raised; they are returned
    as diagnostics on the validation result.
    """

    pass
