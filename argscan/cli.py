"""Command-line interface for argscan."""

import sys
from typing import Optional

from .cli_builder import build_launcher_parser
from .config import ParserConfig
from .model.types import ParseStatus
from .utils.output import OutputFormatter


class CLI:
    """Parses launcher arguments and prints what was recognized as JSON."""

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig.from_environment()
        self.output = OutputFormatter(no_color=self.config.no_color)
        self.parser = build_launcher_parser(self.config, output=self.output)

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code: 0 on success or after help/version output, 1 if the
            arguments could not be parsed, 2 for invalid parser input
        """
        if argv is None:
            argv = sys.argv[1:]

        result = self.parser.run(argv)

        if result.status is ParseStatus.SILENT:
            return 0
        if result.status is ParseStatus.BAD_PARAMETER:
            self.output.print_error(result.message or "Invalid parser input")
            return 2
        if result.status.is_error or result.outcome is None:
            # The diagnostic has already been printed
            return 1

        self.output.print_json(result.outcome.to_dict())
        return 0


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
