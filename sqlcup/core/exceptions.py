"""Custom exception classes for the sqlcup statement generator."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for statement generation errors.

    All custom exceptions in the sqlcup generator inherit from this class.
    """

    pass


class BadArgumentError(ScaffoldError):
    """Error in the command-line input.

    Raised for a malformed entity name, a malformed column definition or an
    invalid option value. The caller can always recover by fixing the
    invocation, so the CLI shows its usage text alongside the message.

    Args:
        reason: Human-readable description of what is wrong
        argument: The offending input fragment, if there is one
    """

    def __init__(self, reason: str, argument: str | None = None) -> None:
        self.reason = reason
        self.argument = argument
        if argument is None:
            message = f"bad argument: {reason}"
        else:
            message = f"bad argument: {reason}: '{argument}'"
        super().__init__(message)


class ValidationError(BadArgumentError):
    """Error when a parsed column list fails validation.

    Args:
        errors: List of validation error messages
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class ConfigurationError(ScaffoldError):
    """Error in application configuration.

    Raised when a configuration value taken from the environment is invalid.

    Args:
        variable_name: The name of the environment variable that caused the error
        reason: Optional description of the problem
    """

    def __init__(self, variable_name: str, reason: str | None = None) -> None:
        self.variable_name = variable_name
        self.reason = reason
        message = f"Invalid configuration variable '{variable_name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
