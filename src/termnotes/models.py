"""Defines the note value and the small parsing helpers used by the command prompt.

The most important classes are :class:`Note` and :class:`Command`.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime


DEFAULT_TIMESTAMP_FORMAT = '%Y-%m-%d [%H:%M]'
DEFAULT_RESERVED_CHARS = '<>:"/\\|?*'
DEFAULT_MAX_TITLE_LENGTH = 255


@dataclass(frozen=True)
class Note:
    """A single note, as held in memory for the duration of one command.

    Instances are immutable; use :meth:`with_body` to get an updated copy.
    """

    name: str
    """The title of the note, which is also the stem of its filename."""

    timestamp: str
    """Human-readable local time at which the note was created. Never changes after creation."""

    content: str = ''
    """Everything that gets written to the file: header line, blank line, then the body."""

    @classmethod
    def new(cls, name: str, timestamp: str, separator: str = ' | ') -> Note:
        """Returns a note whose content is just the header block."""
        note = cls(name, timestamp)
        return replace(note, content=note.header(separator) + '\n\n')

    def header(self, separator: str = ' | ') -> str:
        return f'{self.name}{separator}{self.timestamp}'

    @property
    def user_content(self) -> str:
        """The part of :attr:`content` after the first blank line, i.e. what the user typed."""
        start = self.content.find('\n\n')
        if start < 0:
            return ''
        return self.content[start + 2:]

    def with_body(self, body: str, separator: str = ' | ') -> Note:
        """Returns a copy whose content is the header block followed by ``body``."""
        return replace(self, content=self.header(separator) + '\n\n' + body)


def current_timestamp(fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    return datetime.now().strftime(fmt)


def is_valid_title(title: str, reserved: str = DEFAULT_RESERVED_CHARS,
                   max_length: int = DEFAULT_MAX_TITLE_LENGTH) -> bool:
    """Returns True if ``title`` can safely be used as a filename stem.

    A title is rejected if it contains any of the ``reserved`` characters, or is ``max_length`` characters or longer.
    """
    if any(c in reserved for c in title):
        return False
    return len(title) < max_length


def count_words(text: str) -> int:
    return len(text.split())


def extract_arg(text: str) -> str:
    """Returns everything after the first space in ``text``, or an empty string if there is no space."""
    pos = text.find(' ')
    if pos < 0:
        return ''
    return text[pos + 1:]


@dataclass(frozen=True)
class Command:
    """One line of input at the prompt, with the argument after the command word split out."""

    line: str
    """The raw input, as typed."""

    arg: str
    """Text after the first space, or empty."""

    word_count: int

    @classmethod
    def parse(cls, line: str) -> Command:
        return cls(line=line, arg=extract_arg(line), word_count=count_words(line))
