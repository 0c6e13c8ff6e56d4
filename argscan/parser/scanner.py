"""Token scanner with GNU getopt_long style permutation."""

from dataclasses import dataclass, field
from typing import AbstractSet, Optional

from ..model.models import OptionDescriptor, OptionTable, ShortSpec
from ..model.types import ArgPolicy
from .errors import (
    MissingArgumentError,
    ShortOptionWithoutDescriptorError,
    UnexpectedArgumentError,
    UnrecognizedOptionError,
    UnregisteredShortOptionError,
)


OPTION_PREFIX = "-"
LONG_OPTION_PREFIX = "--"
END_OF_OPTIONS = "--"
ASSIGNMENT_SEPARATOR = "="


@dataclass
class ScannerState:
    """Cursor for a single pass over an argument vector.

    A fresh state is created for every parse, so nothing carries over
    between unrelated invocations.
    """

    argv: list[str]
    index: int = 0
    cluster: str = ""
    """Short option characters still pending from the current token"""

    cluster_token: str = ""
    positionals: list[str] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.argv)


@dataclass(frozen=True)
class OptionMatch:
    """A recognized option occurrence."""

    token: str
    """The command-line token the option was read from"""

    value: Optional[str]
    """Argument consumed by the option, None if it took none"""

    descriptor: Optional[OptionDescriptor] = None
    """None only for exempt short flags with no table entry"""

    flag: Optional[str] = None
    """Short option character, None for long options"""

    @property
    def name(self) -> str:
        if self.descriptor is not None:
            return self.descriptor.name
        return self.flag or ""

    @property
    def display(self) -> str:
        """How the user spelled the option."""
        if self.flag is not None:
            return f"-{self.flag}"
        return f"--{self.name}"


class Scanner:
    """Classifies tokens as long options, short clusters or positionals.

    Options are returned one at a time by ``next_match``. Positionals are set
    aside as they are met, so once scanning ends ``tail`` holds all of them in
    their original relative order, as if every option had been moved in
    front of them.
    """

    def __init__(
        self,
        argv: list[str],
        short_spec: ShortSpec,
        table: OptionTable,
        exempt_shorts: AbstractSet[str] = frozenset(),
    ):
        self.state = ScannerState(argv=list(argv))
        self.short_spec = short_spec
        self.table = table
        self.exempt_shorts = exempt_shorts

    @property
    def tail(self) -> list[str]:
        return list(self.state.positionals)

    def next_match(self) -> Optional[OptionMatch]:
        """Return the next option, or None once no option tokens remain."""
        state = self.state
        while True:
            if state.cluster:
                return self._next_short()

            if state.exhausted:
                return None

            token = state.argv[state.index]

            if token == END_OF_OPTIONS:
                state.index += 1
                self._drain_remaining()
                return None

            if token.startswith(LONG_OPTION_PREFIX):
                state.index += 1
                return self._match_long(token)

            if token.startswith(OPTION_PREFIX) and len(token) > 1:
                state.index += 1
                state.cluster = token[1:]
                state.cluster_token = token
                continue

            # Positional argument
            if self.short_spec.require_order:
                self._drain_remaining()
                return None
            state.positionals.append(token)
            state.index += 1

    def peek(self) -> Optional[str]:
        """Next unprocessed token, None mid-cluster or at the end."""
        state = self.state
        if state.cluster or state.exhausted:
            return None
        return state.argv[state.index]

    def take(self) -> str:
        """Consume the token returned by ``peek``."""
        token = self.state.argv[self.state.index]
        self.state.index += 1
        return token

    def _drain_remaining(self) -> None:
        state = self.state
        state.positionals.extend(state.argv[state.index :])
        state.index = len(state.argv)

    def _match_long(self, token: str) -> OptionMatch:
        body = token[len(LONG_OPTION_PREFIX) :]
        name, separator, attached = body.partition(ASSIGNMENT_SEPARATOR)

        descriptor = self.table.get(name)
        if descriptor is None:
            raise UnrecognizedOptionError(token)

        value: Optional[str] = attached if separator else None

        if descriptor.policy is ArgPolicy.NONE:
            if separator:
                raise UnexpectedArgumentError(descriptor.long_form, attached)
        elif descriptor.policy is ArgPolicy.REQUIRED and not separator:
            if self.state.exhausted:
                raise MissingArgumentError(descriptor.long_form)
            value = self.take()
        # OPTIONAL long options only accept the attached '=value' form

        return OptionMatch(token=token, value=value, descriptor=descriptor)

    def _next_short(self) -> OptionMatch:
        state = self.state
        flag = state.cluster[0]
        rest = state.cluster[1:]
        state.cluster = rest
        token = state.cluster_token

        policy = self.short_spec.policy_for(flag)
        if policy is None:
            state.cluster = ""
            raise UnregisteredShortOptionError(flag, token)

        value: Optional[str] = None
        if policy is ArgPolicy.REQUIRED:
            if rest:
                value = rest
            elif not state.exhausted:
                value = self.take()
            else:
                raise MissingArgumentError(f"-{flag}")
            state.cluster = ""
        elif policy is ArgPolicy.OPTIONAL:
            # Only an attached argument counts: '-zfoo', never '-z foo'
            if rest:
                value = rest
            state.cluster = ""

        descriptor = self.table.find_short(flag)
        if descriptor is None and flag not in self.exempt_shorts:
            raise ShortOptionWithoutDescriptorError(flag, token)

        return OptionMatch(token=token, value=value, descriptor=descriptor, flag=flag)
