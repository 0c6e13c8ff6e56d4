"""Model module for argscan."""

from .types import ArgPolicy, ParseStatus
from .models import (
    SENTINEL,
    OptionDescriptor,
    OptionTable,
    ShortSpec,
    ParsedOptionInstance,
    ParseOutcome,
    ParseResult,
)

__all__ = [
    "ArgPolicy",
    "ParseStatus",
    "SENTINEL",
    "OptionDescriptor",
    "OptionTable",
    "ShortSpec",
    "ParsedOptionInstance",
    "ParseOutcome",
    "ParseResult",
]
