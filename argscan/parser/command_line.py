"""Command-line parsing entry points."""

import dataclasses
from typing import Iterable, Optional, Sequence, Union

from ..config import ParserConfig
from ..help.emitter import HelpEmitter
from ..help.provider import CLI_HELP_FILE, MarkdownHelpProvider, TextProvider
from ..model.models import OptionDescriptor, OptionTable, ParseOutcome, ParseResult, ShortSpec
from ..model.types import ArgPolicy, ParseStatus
from ..utils.output import OutputFormatter
from .accumulator import Accumulator, DefaultAccumulator
from .errors import BadParameterError, CommandLineError, MissingArgumentError, ParseTerminated
from .interceptor import HelpInterceptor
from .scanner import OptionMatch, Scanner


QUOTE_CHARS = ('"', "'")


def copy_strip(argv: Sequence[str]) -> list[str]:
    """Copy an argument vector, removing one pair of surrounding quotes per token.

    Raises:
        BadParameterError: If an entry is not a string
    """
    stripped = []
    for arg in argv:
        if not isinstance(arg, str):
            raise BadParameterError(f"Command-line entries must be strings, got {arg!r}")
        if len(arg) >= 2 and arg[0] in QUOTE_CHARS and arg[-1] == arg[0]:
            arg = arg[1:-1]
        stripped.append(arg)
    return stripped


class CommandLineParser:
    """Parses argument vectors against one option table and short option string.

    A parser holds no per-parse state, so it can be reused for any number
    of independent parses.
    """

    def __init__(
        self,
        table: Union[OptionTable, Iterable[OptionDescriptor]],
        short_spec: str,
        config: Optional[ParserConfig] = None,
        provider: Optional[TextProvider] = None,
        output: Optional[OutputFormatter] = None,
    ):
        """Initialize the parser.

        Args:
            table: Option descriptors, optionally ending with a sentinel
            short_spec: Short options in getopt syntax
            config: Parser settings (defaults to ParserConfig())
            provider: Help text source (defaults to the markdown help files)
            output: Output formatter used to print help and diagnostics

        Raises:
            BadParameterError: If the table or short option string is missing
                or malformed
        """
        if table is None:
            raise BadParameterError("An option table is required")
        if short_spec is None:
            raise BadParameterError("A short option string is required")

        try:
            self.table = table if isinstance(table, OptionTable) else OptionTable(table)
            self.short_spec = ShortSpec.parse(short_spec)
        except ValueError as e:
            raise BadParameterError(str(e)) from e

        self.config = config or ParserConfig()
        self.output = output or OutputFormatter(no_color=self.config.no_color)
        self.provider = provider or MarkdownHelpProvider(self.config.help_dirs)
        self.emitter = HelpEmitter(self.provider, self.output)
        self.interceptor = HelpInterceptor(self.emitter, self.table, self.config)

    def parse(
        self, argv: Sequence[str], accumulator: Optional[Accumulator] = None
    ) -> ParseOutcome:
        """Parse an argument vector (program name excluded).

        Args:
            argv: Arguments to parse; never modified
            accumulator: Records matched options (defaults to DefaultAccumulator)

        Returns:
            The recorded options and positional tail

        Raises:
            SilentTermination: If help or version text was printed
            CommandLineError: If the vector cannot be parsed; the diagnostic
                has already been printed
        """
        if argv is None:
            raise BadParameterError("An argument vector is required")

        store = accumulator or DefaultAccumulator()
        scanner = Scanner(
            copy_strip(argv),
            self.short_spec,
            self.table,
            exempt_shorts=self.config.exempt_shorts,
        )
        outcome = ParseOutcome()

        try:
            while True:
                match = scanner.next_match()
                if match is None:
                    break
                self.interceptor.check(match, scanner)
                self._store_match(match, scanner, store, outcome)
        except CommandLineError as err:
            self._report(err)
            raise

        outcome.tail = scanner.tail
        return outcome

    def run(
        self, argv: Sequence[str], accumulator: Optional[Accumulator] = None
    ) -> ParseResult:
        """Parse an argument vector and return a tagged result instead of raising."""
        try:
            outcome = self.parse(argv, accumulator)
        except ParseTerminated as term:
            return ParseResult(status=term.status, message=str(term))
        return ParseResult(status=ParseStatus.SUCCESS, outcome=outcome)

    def _store_match(
        self,
        match: OptionMatch,
        scanner: Scanner,
        store: Accumulator,
        outcome: ParseOutcome,
    ) -> None:
        descriptor = match.descriptor
        if descriptor is None:
            return

        value = match.value
        if descriptor.policy is ArgPolicy.NONE:
            value = None

        if descriptor.namespaced:
            # Namespaced options read 'key value' and store 'key=value'
            if value is None or scanner.peek() is None:
                raise MissingArgumentError(match.display)
            value = f"{value}={scanner.take()}"

        store.store(descriptor.name, value, outcome)

    def _report(self, err: CommandLineError) -> None:
        if err.topic is None:
            return
        self.emitter.show(CLI_HELP_FILE, err.topic, True, *err.format_args(self.config.tool_name))


def parse_command_line(
    argv: Sequence[str],
    short_spec: str,
    table: Union[OptionTable, Iterable[OptionDescriptor]],
    accumulator: Optional[Accumulator] = None,
    help_file: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    provider: Optional[TextProvider] = None,
    output: Optional[OutputFormatter] = None,
) -> ParseOutcome:
    """Parse argv in one call; see CommandLineParser.parse.

    Args:
        help_file: Help file for usage and per-option topics, overriding the
            one in ``config``
    """
    config = config or ParserConfig()
    if help_file is not None:
        config = dataclasses.replace(config, help_file=help_file)
    parser = CommandLineParser(table, short_spec, config=config, provider=provider, output=output)
    return parser.parse(argv, accumulator)


def run_command_line(
    argv: Sequence[str],
    short_spec: str,
    table: Union[OptionTable, Iterable[OptionDescriptor]],
    accumulator: Optional[Accumulator] = None,
    help_file: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    provider: Optional[TextProvider] = None,
    output: Optional[OutputFormatter] = None,
) -> ParseResult:
    """Like parse_command_line, but returns a tagged ParseResult."""
    try:
        outcome = parse_command_line(
            argv,
            short_spec,
            table,
            accumulator=accumulator,
            help_file=help_file,
            config=config,
            provider=provider,
            output=output,
        )
    except ParseTerminated as term:
        return ParseResult(status=term.status, message=str(term))
    return ParseResult(status=ParseStatus.SUCCESS, outcome=outcome)
