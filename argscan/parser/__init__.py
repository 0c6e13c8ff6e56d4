"""Command-line scanning, help interception and result accumulation."""

from .accumulator import Accumulator, DefaultAccumulator
from .command_line import (
    CommandLineParser,
    copy_strip,
    parse_command_line,
    run_command_line,
)
from .errors import (
    ParseTerminated,
    SilentTermination,
    CommandLineError,
    BadParameterError,
    UnrecognizedOptionError,
    UnregisteredShortOptionError,
    ShortOptionWithoutDescriptorError,
    MissingArgumentError,
    UnexpectedArgumentError,
)
from .interceptor import HELP_DIRECTIVES, HelpInterceptor
from .scanner import OptionMatch, Scanner, ScannerState

__all__ = [
    "Accumulator",
    "DefaultAccumulator",
    "CommandLineParser",
    "copy_strip",
    "parse_command_line",
    "run_command_line",
    "ParseTerminated",
    "SilentTermination",
    "CommandLineError",
    "BadParameterError",
    "UnrecognizedOptionError",
    "UnregisteredShortOptionError",
    "ShortOptionWithoutDescriptorError",
    "MissingArgumentError",
    "UnexpectedArgumentError",
    "HELP_DIRECTIVES",
    "HelpInterceptor",
    "OptionMatch",
    "Scanner",
    "ScannerState",
]
