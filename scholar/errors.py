"""
Gateway error taxonomy.

Transport failures never surface as exceptions: backends report them as
non-success ModelResponse objects. Only shape and configuration problems
are raised, and the gateway absorbs ShapeError itself.
"""


class GatewayError(Exception):
    """Base class for AI gateway errors."""
    pass


class ConfigurationError(GatewayError):
    """No provider can be resolved from the process configuration."""
    pass


class ShapeError(GatewayError):
    """
    Provider text did not contain a usable result.

    Raised when the embedded JSON is absent, unparsable, not an object,
    or missing one of the task's required top-level keys.
    """

    def __init__(self, reason: str, detail: str = ""):
        self.reason = reason
        self.detail = detail
        super().__init__(f"ShapeError[{reason}]: {detail}" if detail else f"ShapeError[{reason}]")
