"""
Error types raised by the optimizer framework.
"""


class ConfigurationError(ValueError):
    """Raised at construction time when an optimizer is misconfigured."""


class ParameterNotFoundError(KeyError):
    """Raised when an adaptive parameter is queried before it was registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown adaptive parameter: {self.name!r}"
