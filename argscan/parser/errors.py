"""Termination signals raised while parsing a command line.

Every way a parse can stop early is a ``ParseTerminated`` subclass carrying
its ``ParseStatus``. Hard errors also name the ``help-cli`` topic that
explains them; the parser renders that topic before the exception leaves
``CommandLineParser.parse``.
"""

from typing import Optional

from ..model.types import ParseStatus


class ParseTerminated(Exception):
    """Base class for anything that ends a parse without an outcome."""

    status: ParseStatus = ParseStatus.SILENT


class SilentTermination(ParseTerminated):
    """Help or version text was already printed; stop without further output."""

    status = ParseStatus.SILENT

    def __init__(self, topic: str):
        super().__init__(f"Displayed help topic '{topic}'")
        self.topic = topic


class CommandLineError(ParseTerminated):
    """Raised when the command line cannot be parsed."""

    status = ParseStatus.BAD_PARAMETER
    topic: Optional[str] = None

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        """Arguments substituted into the diagnostic help topic."""
        return (tool_name,)


class BadParameterError(CommandLineError):
    """Raised for missing or malformed parser inputs."""

    status = ParseStatus.BAD_PARAMETER


class UnrecognizedOptionError(CommandLineError):
    """A long option that is not in the descriptor table."""

    status = ParseStatus.UNRECOGNIZED_LONG_OPTION
    topic = "unrecognized-option"

    def __init__(self, token: str):
        super().__init__(f"Unrecognized option '{token}'")
        self.token = token

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        return (tool_name, self.token)


class UnregisteredShortOptionError(CommandLineError):
    """A short option character missing from the short option string."""

    status = ParseStatus.UNREGISTERED_SHORT_OPTION
    topic = "unregistered-option"

    def __init__(self, flag: str, token: str):
        super().__init__(f"Short option '-{flag}' (in '{token}') is not registered")
        self.flag = flag
        self.token = token

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        return (tool_name, f"-{self.flag}", tool_name)


class ShortOptionWithoutDescriptorError(CommandLineError):
    """A registered short option that no descriptor claims."""

    status = ParseStatus.SHORT_OPTION_MISSING_DESCRIPTOR
    topic = "short-no-long"

    def __init__(self, flag: str, token: str):
        super().__init__(f"Short option '-{flag}' has no long-form option")
        self.flag = flag
        self.token = token

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        return (tool_name, f"-{self.flag}")


class MissingArgumentError(CommandLineError):
    """An option that requires an argument reached the end of the vector."""

    status = ParseStatus.MISSING_ARGUMENT
    topic = "missing-argument"

    def __init__(self, option: str):
        super().__init__(f"Option '{option}' requires an argument")
        self.option = option

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        return (tool_name, self.option)


class UnexpectedArgumentError(CommandLineError):
    """A long option without arguments was given one via '='."""

    status = ParseStatus.UNEXPECTED_ARGUMENT
    topic = "unexpected-argument"

    def __init__(self, option: str, value: str):
        super().__init__(f"Option '{option}' does not take an argument, but '{value}' given")
        self.option = option
        self.value = value

    def format_args(self, tool_name: str) -> tuple[str, ...]:
        return (tool_name, self.option, self.value)
