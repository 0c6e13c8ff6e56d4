"""Interception of inline help and version requests."""

from typing import Optional

from ..config import ParserConfig
from ..help.emitter import HelpEmitter
from ..help.provider import CLI_HELP_FILE
from ..model.models import OptionTable
from .errors import SilentTermination
from .scanner import OptionMatch, Scanner


# Argument values that turn an option into a request for its own help
HELP_DIRECTIVES = frozenset({"help", "-help", "--help", "h", "-h"})

VERSION_TARGETS = frozenset({"version", "V"})
HELP_TARGETS = frozenset({"help", "h"})


class HelpInterceptor:
    """Short-circuits the parse when help or version text is requested.

    Every handled request prints its text and raises ``SilentTermination``;
    ``check`` returns normally only when the match is an ordinary option.
    """

    def __init__(self, emitter: HelpEmitter, table: OptionTable, config: ParserConfig):
        self.emitter = emitter
        self.table = table
        self.config = config

    def is_help_request(self, match: OptionMatch) -> bool:
        if match.flag is not None:
            return match.flag == self.config.help_flag
        return match.name == self.config.help_option

    def is_version_request(self, match: OptionMatch) -> bool:
        if match.flag is not None:
            return match.flag == self.config.version_flag
        return match.name == self.config.version_option

    def check(self, match: OptionMatch, scanner: Scanner) -> None:
        """Handle the match if it asks for help or version text.

        Raises:
            SilentTermination: If text was printed and parsing must stop
        """
        if self.is_version_request(match):
            self._show_version()
        if self.is_help_request(match):
            self._show_help(self._help_target(match, scanner))
        self._check_help_directive(match, scanner)

    def _help_target(self, match: OptionMatch, scanner: Scanner) -> Optional[str]:
        """The topic asked about: attached argument or the following token."""
        target = match.value
        if target is None and scanner.peek() is not None:
            target = scanner.take()
        if target is None:
            return None
        target = target.lstrip("-")
        return target or None

    def _show_version(self) -> None:
        config = self.config
        self.emitter.show(
            config.help_file,
            "version",
            False,
            config.tool_name,
            config.package_name,
            config.version,
            config.bug_report,
        )
        raise SilentTermination("version")

    def _show_help(self, target: Optional[str]) -> None:
        config = self.config
        tool = config.tool_name

        if target in VERSION_TARGETS:
            self.emitter.show(CLI_HELP_FILE, "version", False, tool)
            raise SilentTermination("version")

        if target is None:
            self.emitter.show(
                config.help_file,
                "usage",
                False,
                tool,
                config.package_name,
                config.version,
                config.bug_report,
            )
            raise SilentTermination("usage")

        if target in HELP_TARGETS:
            self.emitter.show(CLI_HELP_FILE, "help", False, tool)
            raise SilentTermination("help")

        descriptor = self.table.get(target)
        if descriptor is None and len(target) == 1:
            descriptor = self.table.find_short(target)
        if descriptor is not None:
            self.emitter.show(config.help_file, descriptor.name, False, tool)
            raise SilentTermination(descriptor.name)

        self.emitter.show(CLI_HELP_FILE, "unknown-option", True, target, tool)
        raise SilentTermination("unknown-option")

    def _check_help_directive(self, match: OptionMatch, scanner: Scanner) -> None:
        """Handle '--name help' style requests for help on one option."""
        if match.descriptor is None:
            return

        candidate = match.value
        from_next_token = False
        if candidate is None:
            candidate = scanner.peek()
            from_next_token = True

        if candidate not in HELP_DIRECTIVES:
            return

        if from_next_token:
            scanner.take()
        self.emitter.show(self.config.help_file, match.descriptor.name, False, self.config.tool_name)
        raise SilentTermination(match.descriptor.name)
