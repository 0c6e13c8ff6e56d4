"""Type definitions for argscan models."""

from enum import Enum


class ArgPolicy(Enum):
    """Whether an option takes an argument."""

    NONE = "none"
    REQUIRED = "required"
    OPTIONAL = "optional"


class ParseStatus(Enum):
    """How a parse invocation ended."""

    SUCCESS = "success"
    SILENT = "silent"
    BAD_PARAMETER = "bad-parameter"
    UNRECOGNIZED_LONG_OPTION = "unrecognized-long-option"
    UNREGISTERED_SHORT_OPTION = "unregistered-short-option"
    SHORT_OPTION_MISSING_DESCRIPTOR = "short-option-missing-descriptor"
    MISSING_ARGUMENT = "missing-argument"
    UNEXPECTED_ARGUMENT = "unexpected-argument"

    @property
    def is_error(self) -> bool:
        """SUCCESS and SILENT are the only non-error outcomes."""
        return self not in (ParseStatus.SUCCESS, ParseStatus.SILENT)
