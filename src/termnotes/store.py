"""Reads and writes notes, one file per note, in a single flat directory.

The most important class is :class:`NoteStore`.
"""

import logging
import os
import os.path
from typing import List

from termnotes.conf import NotesConf
from termnotes.models import Note


logger = logging.getLogger(__name__)


class Error(Exception):
    """Base class for problems accessing stored notes."""
    def __init__(self, message: str, title: str = None, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.title = title
        self.cause = cause


class NoteExistsError(Error):
    """Raised when creating a note whose file already exists."""
    def __init__(self, title: str):
        super().__init__(f"'{title}' already exists.", title)


class NoteNotFoundError(Error):
    """Raised when a note file is missing or cannot be opened or removed."""


class SaveError(Error):
    """Raised when a note file cannot be opened for writing, or the note cannot be encoded.

    Depending on the platform, the previous contents of the file may already have been truncated.
    """


class StoreMissingError(Error):
    """Raised when the save directory does not exist."""


class StoreReadError(Error):
    """Raised when the save directory exists but its contents cannot be listed."""


class NoteStore:
    """Maps note titles to files in :attr:`NotesConf.save_dir` and moves notes between memory and disk.

    Titles are used verbatim as filename stems; callers are expected to have checked them with
    :func:`termnotes.models.is_valid_title`.

    .. attribute:: conf
       :type: termnotes.conf.NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf

    def ensure_dir(self) -> None:
        """Creates the save directory if it does not already exist."""
        os.makedirs(self.conf.save_dir, exist_ok=True)

    def path_for(self, title: str) -> str:
        return os.path.join(self.conf.save_dir, title + self.conf.extension)

    def exists(self, title: str) -> bool:
        return os.path.exists(self.path_for(title))

    def save(self, note: Note) -> None:
        """Writes the note's content to its file, replacing anything already there.

        Raises :exc:`SaveError` if the file cannot be written, or the content cannot be encoded.
        """
        path = self.path_for(note.name)
        try:
            with open(path, 'w', encoding=self.conf.encoding) as file:
                file.write(note.content)
        except (OSError, UnicodeError) as e:
            logger.warning('Failed to write %s', path, exc_info=e)
            raise SaveError(f'{note.name} failed to save.', note.name, e)
        logger.debug('Wrote %d characters to %s', len(note.content), path)

    def load(self, title: str, keep_body: bool = True) -> Note:
        """Reads a note back from its file.

        The name and timestamp are recovered from the header line. If ``keep_body`` is True, every remaining line
        is kept (each terminated by a newline); otherwise the body is replaced with a single empty line, so that
        anything edited afterward replaces the old body entirely.

        Raises :exc:`NoteNotFoundError` if the file does not exist, cannot be read, or is not valid text in the
        configured encoding.
        """
        path = self.path_for(title)
        try:
            with open(path, 'r', encoding=self.conf.encoding) as file:
                head = file.readline().rstrip('\n')
                if keep_body:
                    body = ''.join(line.rstrip('\n') + '\n' for line in file)
                else:
                    body = '\n'
        except (OSError, UnicodeError) as e:
            logger.warning('Failed to read %s', path, exc_info=e)
            raise NoteNotFoundError(f"'{title}' does not exist or failed to load.", title, e)
        sep = head.find(self.conf.separator)
        timestamp = head[sep + len(self.conf.separator):] if sep >= 0 else head
        logger.debug('Loaded %s (keep_body=%s)', path, keep_body)
        return Note(title, timestamp, head + '\n' + body)

    def delete(self, title: str) -> None:
        """Removes the note's file.

        Raises :exc:`NoteNotFoundError` if there is no such file or it cannot be removed.
        """
        path = self.path_for(title)
        try:
            os.remove(path)
        except OSError as e:
            logger.warning('Failed to delete %s', path, exc_info=e)
            raise NoteNotFoundError(f'{title} not found or failed to delete.', title, e)
        logger.debug('Deleted %s', path)

    def list_names(self) -> List[str]:
        """Returns the titles of all notes in the save directory, in the order the filesystem lists them.

        Only files directly inside the directory are included. Raises :exc:`StoreMissingError` if the directory
        does not exist, or :exc:`StoreReadError` if it cannot be read.
        """
        if not os.path.isdir(self.conf.save_dir):
            raise StoreMissingError('Could not find save directory.')
        try:
            with os.scandir(self.conf.save_dir) as entries:
                return [os.path.splitext(e.name)[0] for e in entries if e.is_file()]
        except OSError as e:
            logger.warning('Failed to list %s', self.conf.save_dir, exc_info=e)
            raise StoreReadError('Could not read save directory.', cause=e)
