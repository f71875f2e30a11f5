"""Custom exception hierarchy for kvforge."""

from __future__ import annotations


class KvForgeError(Exception):
    """Base exception for all kvforge errors.

    All custom exceptions in kvforge inherit from this class, making it
    easy to catch any kvforge-specific error with a single except clause.
    """


class ConfigError(KvForgeError):
    """Raised when a workload configuration is invalid or missing.

    Configuration errors are fatal: a config that fails to load never
    produces a partially usable session config.

    Attributes:
        method: Command method the error relates to, if any.
        field: Config field the error relates to, if any.
    """

    def __init__(self, message: str, *, method: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.field = field


class MissingFieldError(ConfigError):
    """Raised when a required config field is absent.

    Examples:
        - The top-level ``workload`` array is missing or empty.
        - A workload has no ``parameter`` array.
    """


class InvalidArityError(ConfigError):
    """Raised when a workload has the wrong number of parameters for its method."""


class UnknownMethodError(ConfigError):
    """Raised when a workload names a method the codec cannot generate."""


class MissingScriptBodyError(ConfigError):
    """Raised when an ``eval``/``evalsha`` workload has no ``script-body``."""


class MalformedParameterError(ConfigError):
    """Raised when a config value has the wrong shape or type.

    Examples:
        - A ``parameter`` entry is not a table.
        - A parameter spec contains an unrecognised key.
        - A parameter ``size`` is zero or negative.
    """


class GenerationError(KvForgeError):
    """Raised when a command cannot be rendered into a request."""


class NumericParseError(GenerationError):
    """Raised when a parameter value that must be an integer does not parse.

    Attributes:
        method: Command method being generated.
        value: The offending parameter value.
    """

    def __init__(self, method: str, value: str) -> None:
        super().__init__(f"{method}: expected an integer parameter value, got {value!r}")
        self.method = method
        self.value = value
