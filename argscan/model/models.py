"""Model classes for option descriptors and parse results."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from .types import ArgPolicy, ParseStatus


SHORT_SPEC_ARG_MARKER = ":"
SHORT_SPEC_REQUIRE_ORDER = "+"


@dataclass(frozen=True)
class OptionDescriptor:
    """Static description of one recognized option."""

    name: str
    """Canonical long name (without leading dashes), unique within a table"""

    short: Optional[str] = None
    """Single-character short flag, None if the option is long-only"""

    policy: ArgPolicy = ArgPolicy.NONE
    """Whether the option takes an argument"""

    namespaced: bool = False
    """Argument is a key followed by a value token, stored as 'key=value'"""

    @property
    def is_sentinel(self) -> bool:
        """An empty name terminates a descriptor table."""
        return self.name == ""

    @property
    def long_form(self) -> str:
        return f"--{self.name}"

    def __str__(self) -> str:
        if self.short:
            return f"{self.long_form} (-{self.short})"
        return self.long_form


SENTINEL = OptionDescriptor(name="")


class OptionTable:
    """Ordered, validated collection of option descriptors.

    Iteration stops at the first sentinel descriptor (empty name), so tables
    written in the classic terminated-array style can be passed as is.
    """

    def __init__(self, descriptors: Iterable[OptionDescriptor]):
        self._by_name: dict[str, OptionDescriptor] = {}
        self._by_short: dict[str, OptionDescriptor] = {}

        for descriptor in descriptors:
            if descriptor.is_sentinel:
                break
            self._add(descriptor)

    def _add(self, descriptor: OptionDescriptor) -> None:
        if descriptor.name.startswith("-"):
            raise ValueError(
                f"Option name '{descriptor.name}' must not include leading dashes"
            )
        if descriptor.name in self._by_name:
            raise ValueError(f"Duplicate option '{descriptor.name}'")

        if descriptor.short is not None:
            if len(descriptor.short) != 1 or descriptor.short in ("-", SHORT_SPEC_ARG_MARKER):
                raise ValueError(
                    f"Option '{descriptor.name}' has invalid short flag '{descriptor.short}'"
                )
            existing = self._by_short.get(descriptor.short)
            if existing is not None:
                raise ValueError(
                    f"Short flag '-{descriptor.short}' is used by both "
                    f"'{existing.name}' and '{descriptor.name}'"
                )
            self._by_short[descriptor.short] = descriptor

        if descriptor.namespaced and descriptor.policy is not ArgPolicy.REQUIRED:
            raise ValueError(
                f"Namespaced option '{descriptor.name}' must require an argument"
            )

        self._by_name[descriptor.name] = descriptor

    def get(self, name: str) -> Optional[OptionDescriptor]:
        """Look up a descriptor by exact canonical name."""
        return self._by_name.get(name)

    def find_short(self, flag: str) -> Optional[OptionDescriptor]:
        """Look up the descriptor registered for a short flag."""
        return self._by_short.get(flag)

    def names(self) -> list[str]:
        return list(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[OptionDescriptor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


@dataclass(frozen=True)
class ShortSpec:
    """Short options in POSIX getopt syntax.

    A letter takes no argument, a letter followed by ':' requires one and a
    letter followed by '::' takes an optional, attached argument. A leading
    '+' stops option scanning at the first positional argument; a leading
    ':' is accepted for compatibility and has no effect.
    """

    policies: dict[str, ArgPolicy] = field(default_factory=dict)
    require_order: bool = False

    @classmethod
    def parse(cls, spec: str) -> "ShortSpec":
        """Parse a getopt-style short option string.

        Raises:
            ValueError: If the string is malformed
        """
        require_order = False
        idx = 0
        while idx < len(spec) and spec[idx] in (SHORT_SPEC_REQUIRE_ORDER, SHORT_SPEC_ARG_MARKER):
            if spec[idx] == SHORT_SPEC_REQUIRE_ORDER:
                require_order = True
            idx += 1

        policies: dict[str, ArgPolicy] = {}
        while idx < len(spec):
            flag = spec[idx]
            if flag in ("-", SHORT_SPEC_ARG_MARKER, SHORT_SPEC_REQUIRE_ORDER) or flag.isspace():
                raise ValueError(f"Invalid short option '{flag}' in '{spec}'")
            idx += 1

            if spec.startswith(SHORT_SPEC_ARG_MARKER * 2, idx):
                policy = ArgPolicy.OPTIONAL
                idx += 2
            elif spec.startswith(SHORT_SPEC_ARG_MARKER, idx):
                policy = ArgPolicy.REQUIRED
                idx += 1
            else:
                policy = ArgPolicy.NONE

            if flag in policies:
                raise ValueError(f"Short option '{flag}' appears twice in '{spec}'")
            policies[flag] = policy

        return cls(policies=policies, require_order=require_order)

    def policy_for(self, flag: str) -> Optional[ArgPolicy]:
        return self.policies.get(flag)

    def __contains__(self, flag: object) -> bool:
        return flag in self.policies


@dataclass
class ParsedOptionInstance:
    """All occurrences of one option within a parse."""

    key: str
    values: list[str] = field(default_factory=list)

    @property
    def is_flag(self) -> bool:
        """No values recorded: presence alone means 'true'."""
        return not self.values


@dataclass
class ParseOutcome:
    """Options recorded by a successful parse plus the positional tail."""

    instances: dict[str, ParsedOptionInstance] = field(default_factory=dict)
    """Recorded options keyed by canonical name, in first-seen order"""

    tail: list[str] = field(default_factory=list)
    """Positional arguments left once option scanning finished"""

    def is_taken(self, name: str) -> bool:
        return name in self.instances

    def get_values(self, name: str) -> list[str]:
        instance = self.instances.get(name)
        if instance is None:
            return []
        return list(instance.values)

    def get_value(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the last value given for an option (last one wins)."""
        values = self.get_values(name)
        if not values:
            return default
        return values[-1]

    def count(self, name: str) -> int:
        """Number of values recorded for an option."""
        return len(self.get_values(name))

    def to_dict(self) -> dict[str, object]:
        return {
            "options": {key: list(inst.values) for key, inst in self.instances.items()},
            "tail": list(self.tail),
        }


@dataclass(frozen=True)
class ParseResult:
    """Tagged result of a parse: a status plus the outcome on success."""

    status: ParseStatus
    outcome: Optional[ParseOutcome] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.SUCCESS
