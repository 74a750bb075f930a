"""Provides the main entry point for using the library, :class:`Notes`"""

from __future__ import annotations
import logging
from typing import List

from termnotes.conf import NotesConf
from termnotes.editor import EditorSession
from termnotes.models import Note, current_timestamp
from termnotes.store import NoteStore, NoteExistsError


logger = logging.getLogger(__name__)


class Notes:
    """Main entry point for working programmatically with your notes.

    Generally, you should get an instance using :meth:`Notes.for_user` or :meth:`termnotes.conf.NotesConf.instantiate`.
    It can be used as a context manager.

    Each editing operation hands the note to :attr:`editor`, which collects the user's input and saves the result.

    .. attribute:: conf
       :type: termnotes.conf.NotesConf

    .. attribute:: store
       :type: termnotes.store.NoteStore

    .. attribute:: editor
       :type: termnotes.editor.EditorSession

    Here's an example of appending to a note from a script, without a terminal:

    .. code-block:: python

       import io
       from termnotes.api import Notes
       from termnotes.editor import EditorSession

       with Notes.for_user() as notes:
           notes.editor = EditorSession(notes.store, stdin=io.StringIO('milk\\neggs\\n!quit\\n'))
           notes.append('groceries')
    """

    @staticmethod
    def for_user() -> Notes:
        """Creates an instance using the user's ``~/.termnotes.conf.py`` file, or default settings."""
        return NotesConf.for_user().instantiate()

    def __init__(self, conf: NotesConf, editor: EditorSession = None):
        self.conf = conf
        self.store = NoteStore(conf)
        self.editor = editor or EditorSession(self.store)

    def create(self, title: str) -> Note:
        """Creates a new note, timestamped now, and opens it in the editor.

        Raises :exc:`termnotes.store.NoteExistsError` without touching anything if the note already exists.
        """
        if self.store.exists(title):
            raise NoteExistsError(title)
        note = Note.new(title, current_timestamp(self.conf.timestamp_format), self.conf.separator)
        logger.debug('Creating %s', title)
        return self.editor.run(note)

    def load(self, title: str, append_mode: bool) -> Note:
        """Opens an existing note in the editor.

        In append mode the existing body is shown and kept; otherwise it is discarded and replaced by whatever the
        user types. Either way, the original creation timestamp is preserved.

        Raises :exc:`termnotes.store.NoteNotFoundError` if the note cannot be read.
        """
        note = self.store.load(title, keep_body=append_mode)
        return self.editor.run(note)

    def append(self, title: str) -> Note:
        return self.load(title, True)

    def overwrite(self, title: str) -> Note:
        return self.load(title, False)

    def delete(self, title: str) -> None:
        self.store.delete(title)

    def list(self) -> List[str]:
        return self.store.list_names()

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
