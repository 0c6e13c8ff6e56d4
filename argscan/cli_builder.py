"""Factory for constructing the launcher option table and parser."""

from typing import Optional

from .config import ParserConfig
from .model.models import SENTINEL, OptionDescriptor, OptionTable
from .model.types import ArgPolicy
from .parser.command_line import CommandLineParser
from .utils.output import OutputFormatter


LAUNCHER_SHORT_OPTIONS = "h::Vvqn:H:x:d::"

LAUNCHER_OPTIONS = [
    OptionDescriptor("help", "h", ArgPolicy.OPTIONAL),
    OptionDescriptor("version", "V", ArgPolicy.NONE),
    OptionDescriptor("verbose", "v", ArgPolicy.NONE),
    OptionDescriptor("quiet", "q", ArgPolicy.NONE),
    OptionDescriptor("np", "n", ArgPolicy.REQUIRED),
    OptionDescriptor("host", "H", ArgPolicy.REQUIRED),
    OptionDescriptor("hostfile", policy=ArgPolicy.REQUIRED),
    OptionDescriptor("map-by", policy=ArgPolicy.REQUIRED),
    OptionDescriptor("bind-to", policy=ArgPolicy.REQUIRED),
    OptionDescriptor("wdir", policy=ArgPolicy.REQUIRED),
    OptionDescriptor("export", "x", ArgPolicy.REQUIRED),
    OptionDescriptor("debug", "d", ArgPolicy.OPTIONAL),
    OptionDescriptor("output", policy=ArgPolicy.OPTIONAL),
    OptionDescriptor("mca", policy=ArgPolicy.REQUIRED, namespaced=True),
    OptionDescriptor("pmix-mca", policy=ArgPolicy.REQUIRED, namespaced=True),
    SENTINEL,
]


def build_launcher_table() -> OptionTable:
    """Construct the option table of the bundled launcher."""
    return OptionTable(LAUNCHER_OPTIONS)


def build_launcher_parser(
    config: Optional[ParserConfig] = None,
    output: Optional[OutputFormatter] = None,
) -> CommandLineParser:
    """Construct a parser for the bundled launcher options."""
    return CommandLineParser(
        build_launcher_table(),
        LAUNCHER_SHORT_OPTIONS,
        config=config,
        output=output,
    )
