"""Help text lookup and display for argscan."""

from .provider import (
    CLI_HELP_FILE,
    ERROR_BANNER,
    HelpTopic,
    MarkdownHelpProvider,
    TextProvider,
)
from .emitter import HelpEmitter

__all__ = [
    "CLI_HELP_FILE",
    "ERROR_BANNER",
    "HelpTopic",
    "MarkdownHelpProvider",
    "TextProvider",
    "HelpEmitter",
]
