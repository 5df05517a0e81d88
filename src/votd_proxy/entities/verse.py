"""Verse domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class VerseEntity:
    """Verse of the day, reshaped from the two upstream responses.

    Attributes:
        text: Passage text (or the "Text unavailable" sentinel)
        human_reference: Readable reference such as "Matthew 15:13"
        url: Share link on bible.com for the passage
    """

    text: str
    human_reference: str
    url: str
