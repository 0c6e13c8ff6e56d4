"""Parser configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional


VERSION = "0.3.0"

HELP_PATH_ENV = "ARGSCAN_HELP_PATH"
NO_COLOR_ENV = "NO_COLOR"

DEFAULT_HELP_DIR = Path(__file__).parent / "help" / "files"
DEFAULT_HELP_FILE = "help-launcher.md"


@dataclass(frozen=True)
class ParserConfig:
    """Settings shared by every parse made with one parser."""

    tool_name: str = "argscan"
    """Name the tool is invoked as, substituted into help text"""

    package_name: str = "argscan"
    version: str = VERSION
    bug_report: str = "the argscan issue tracker"

    help_file: str = DEFAULT_HELP_FILE
    """Help file holding usage, version and per-option topics"""

    help_dirs: tuple[Path, ...] = field(default=(DEFAULT_HELP_DIR,))
    """Directories searched for help files, in order"""

    help_flag: str = "h"
    help_option: str = "help"
    version_flag: str = "V"
    version_option: str = "version"

    no_color: bool = False

    @property
    def exempt_shorts(self) -> frozenset[str]:
        """Short flags that need no descriptor table entry."""
        return frozenset({self.help_flag, self.version_flag})

    @classmethod
    def from_environment(
        cls, environ: Optional[Mapping[str, str]] = None, **overrides
    ) -> "ParserConfig":
        """Build a config honouring ARGSCAN_HELP_PATH and NO_COLOR.

        Directories listed in ARGSCAN_HELP_PATH are searched before the
        bundled help files.

        Args:
            environ: Environment to read (defaults to os.environ)
            **overrides: Explicit field values, taking precedence
        """
        env = os.environ if environ is None else environ

        extra_dirs = tuple(
            Path(entry) for entry in env.get(HELP_PATH_ENV, "").split(os.pathsep) if entry
        )
        values: dict[str, object] = {
            "help_dirs": extra_dirs + (DEFAULT_HELP_DIR,),
            "no_color": bool(env.get(NO_COLOR_ENV)),
        }
        values.update(overrides)
        return cls(**values)
