"""Accumulators record matched options into a ParseOutcome."""

from typing import Optional, Protocol

from ..model.models import ParsedOptionInstance, ParseOutcome


class Accumulator(Protocol):
    """Records one matched option occurrence.

    Custom implementations may redirect values elsewhere, but callers that
    inspect the outcome expect one instance per name, first-seen order, and
    values appended in encounter order.
    """

    def store(self, name: str, value: Optional[str], outcome: ParseOutcome) -> None:
        ...


class DefaultAccumulator:
    """Merges repeated options into a single ordered value list."""

    def store(self, name: str, value: Optional[str], outcome: ParseOutcome) -> None:
        instance = outcome.instances.get(name)
        if instance is None:
            instance = ParsedOptionInstance(key=name)
            outcome.instances[name] = instance

        # A None value is a boolean flag: presence is the signal
        if value is not None:
            instance.values.append(value)
