"""Help text lookup backed by markdown topic files.

A help file is a markdown document where every level-1 heading names a
topic and everything under it, up to the next level-1 heading, is that
topic's text. Positional ``{0}``-style placeholders are filled from the
format arguments passed to ``lookup``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

import mistune


CLI_HELP_FILE = "help-cli.md"
ERROR_BANNER = "-" * 74


class TextProvider(Protocol):
    """Source of all user-visible help, version and diagnostic text."""

    def lookup(
        self, topic_file: str, topic: str, is_error: bool, *args: object
    ) -> Optional[str]:
        ...


@dataclass
class HelpTopic:
    """A topic in a help file (everything under a level-1 heading)."""

    title: str
    content: str


class MarkdownHelpProvider:
    """Looks up help topics in markdown files on a search path."""

    def __init__(self, search_dirs: Sequence[Path]):
        self.search_dirs = [Path(d) for d in search_dirs]
        self.markdown_parser = mistune.create_markdown(renderer=None)
        self._cache: dict[str, Optional[dict[str, HelpTopic]]] = {}

    def lookup(
        self, topic_file: str, topic: str, is_error: bool, *args: object
    ) -> Optional[str]:
        """Return the formatted text of a topic, or None if it does not exist.

        A topic whose placeholders cannot be filled from ``args`` is
        returned unformatted.

        Args:
            topic_file: Help file name, searched for in ``search_dirs``
            topic: Topic (level-1 heading) within the file
            is_error: If True, frame the text with banner lines
            *args: Values for the topic's positional placeholders
        """
        topics = self.load(topic_file)
        if topics is None:
            return None

        help_topic = topics.get(topic)
        if help_topic is None:
            return None

        text = help_topic.content
        if args:
            try:
                text = text.format(*args)
            except (IndexError, KeyError, ValueError):
                # Literal braces or too few arguments: show the raw topic
                text = help_topic.content

        if is_error:
            text = f"{ERROR_BANNER}\n{text}\n{ERROR_BANNER}"
        return text

    def find_file(self, topic_file: str) -> Optional[Path]:
        """Locate a help file on the search path (first match wins)."""
        for directory in self.search_dirs:
            candidate = directory / topic_file
            if candidate.is_file():
                return candidate
        return None

    def load(self, topic_file: str) -> Optional[dict[str, HelpTopic]]:
        """Parse a help file into its topics, caching the result."""
        if topic_file in self._cache:
            return self._cache[topic_file]

        path = self.find_file(topic_file)
        topics = None
        if path is not None:
            topics = {
                topic.title: topic
                for topic in self._extract_topics(path.read_text(encoding="utf-8"))
            }
        self._cache[topic_file] = topics
        return topics

    def _extract_topics(self, content: str) -> list[HelpTopic]:
        """Extract all top-level topics from markdown content."""
        tokens = self.markdown_parser(content)
        topics = []
        current_topic = None
        current_blocks: list[str] = []

        for token in tokens:
            if token["type"] == "heading":
                level = token["attrs"]["level"]
                title = self._extract_text_from_token(token).strip()

                # Only level 1 headings start new topics
                if level == 1:
                    if current_topic is not None:
                        current_topic.content = "\n\n".join(current_blocks)
                        topics.append(current_topic)
                        current_blocks = []
                    current_topic = HelpTopic(title=title, content="")
                elif current_topic is not None:
                    current_blocks.append(title)

            elif current_topic is not None:
                if token["type"] == "paragraph":
                    current_blocks.append(self._extract_text_from_token(token))
                elif token["type"] == "list":
                    current_blocks.append("\n".join(self._extract_list_items(token)))
                elif token["type"] == "block_code":
                    current_blocks.append(token["raw"].rstrip("\n"))

        if current_topic is not None:
            current_topic.content = "\n\n".join(current_blocks)
            topics.append(current_topic)

        return topics

    def _extract_text_from_token(self, token: dict) -> str:
        """Extract plain text from a token, keeping line breaks."""
        if "children" in token:
            return "".join(self._extract_text_from_token(child) for child in token["children"])
        if token["type"] in ("softbreak", "linebreak"):
            return "\n"
        return token.get("raw", "")

    def _extract_list_items(self, list_token: dict) -> list[str]:
        """Extract list items as bulleted lines."""
        ordered = list_token.get("attrs", {}).get("ordered", False)
        items = []
        for number, item in enumerate(list_token.get("children", []), start=1):
            if item["type"] == "list_item":
                bullet = f"{number}." if ordered else "-"
                items.append(f"{bullet} {self._extract_text_from_token(item)}")
        return items
