"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Optional

import pytest

from argscan.config import ParserConfig
from argscan.model.models import SENTINEL, OptionDescriptor, OptionTable
from argscan.model.types import ArgPolicy
from argscan.parser.command_line import CommandLineParser
from argscan.utils.output import OutputFormatter


SHORT_OPTIONS = "h::Vvn:z::o:"


class RecordingProvider:
    """Text provider that remembers every lookup and echoes the topic."""

    def __init__(self, missing: tuple[str, ...] = ()):
        self.lookups: list[tuple[str, str, bool, tuple[object, ...]]] = []
        self.missing = set(missing)

    def lookup(
        self, topic_file: str, topic: str, is_error: bool, *args: object
    ) -> Optional[str]:
        self.lookups.append((topic_file, topic, is_error, args))
        if topic in self.missing:
            return None
        return f"<{topic_file}:{topic}>"

    @property
    def topics(self) -> list[str]:
        return [topic for _, topic, _, _ in self.lookups]

    @property
    def last(self) -> tuple[str, str, bool, tuple[object, ...]]:
        assert self.lookups, "no help topic was requested"
        return self.lookups[-1]


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def descriptors() -> list[OptionDescriptor]:
    """A small option table in terminated-array style."""
    return [
        OptionDescriptor("help", "h", ArgPolicy.OPTIONAL),
        OptionDescriptor("version", "V", ArgPolicy.NONE),
        OptionDescriptor("verbose", "v", ArgPolicy.NONE),
        OptionDescriptor("np", "n", ArgPolicy.REQUIRED),
        OptionDescriptor("zip", "z", ArgPolicy.OPTIONAL),
        OptionDescriptor("output", policy=ArgPolicy.OPTIONAL),
        OptionDescriptor("host", policy=ArgPolicy.REQUIRED),
        OptionDescriptor("prte-mca", policy=ArgPolicy.REQUIRED, namespaced=True),
        SENTINEL,
    ]


@pytest.fixture
def table(descriptors: list[OptionDescriptor]) -> OptionTable:
    return OptionTable(descriptors)


@pytest.fixture
def config() -> ParserConfig:
    return ParserConfig(tool_name="launcher", package_name="Launcher", version="9.9")


@pytest.fixture
def provider() -> RecordingProvider:
    return RecordingProvider()


@pytest.fixture
def parser(
    table: OptionTable, config: ParserConfig, provider: RecordingProvider
) -> CommandLineParser:
    """Parser over the test table that records help lookups instead of reading files."""
    return CommandLineParser(
        table,
        SHORT_OPTIONS,
        config=config,
        provider=provider,
        output=OutputFormatter(no_color=True),
    )
