"""argscan - getopt-style command-line parsing with inline help for launcher tools."""

from .config import VERSION as __version__, ParserConfig
from .model import (
    ArgPolicy,
    ParseStatus,
    SENTINEL,
    OptionDescriptor,
    OptionTable,
    ParsedOptionInstance,
    ParseOutcome,
    ParseResult,
)
from .parser import (
    Accumulator,
    DefaultAccumulator,
    CommandLineParser,
    parse_command_line,
    run_command_line,
    ParseTerminated,
    SilentTermination,
    CommandLineError,
)

__all__ = [
    "__version__",
    "ParserConfig",
    "ArgPolicy",
    "ParseStatus",
    "SENTINEL",
    "OptionDescriptor",
    "OptionTable",
    "ParsedOptionInstance",
    "ParseOutcome",
    "ParseResult",
    "Accumulator",
    "DefaultAccumulator",
    "CommandLineParser",
    "parse_command_line",
    "run_command_line",
    "ParseTerminated",
    "SilentTermination",
    "CommandLineError",
]
