"""Prints help topics through the output formatter."""

from ..utils.output import OutputFormatter
from .provider import TextProvider


NO_HELP_NOTICE = (
    "Sorry! You were supposed to get help about:\n"
    "    {topic}\n"
    "from the file:\n"
    "    {topic_file}\n"
    "But I couldn't find that topic in the file. Sorry!"
)


class HelpEmitter:
    """Looks up a topic and prints it, errors to stderr and help to stdout."""

    def __init__(self, provider: TextProvider, output: OutputFormatter):
        self.provider = provider
        self.output = output

    def show(self, topic_file: str, topic: str, is_error: bool, *args: object) -> bool:
        """Print a help topic.

        Returns:
            True if the topic was found, False if the fallback notice was printed
        """
        text = self.provider.lookup(topic_file, topic, is_error, *args)
        if text is None:
            self.output.print_block(
                NO_HELP_NOTICE.format(topic=topic, topic_file=topic_file),
                style="yellow",
                error=True,
            )
            return False

        if is_error:
            self.output.print_block(text, style="red", error=True)
        else:
            self.output.print_block(text)
        return True
