"""Provides :class:`EditorSession`, the line-by-line editor used for creating and changing notes."""

import sys
from typing import TextIO

from termnotes.models import Note
from termnotes.screen import Screen, NullScreen
from termnotes.store import NoteStore


class EditorSession:
    """Shows a note's existing text, then collects new lines from the user until they type the sentinel.

    The new lines are added after the existing text and the note is saved. There is no way to change text that
    was already there; to start over, load the note in overwrite mode, which hands this class a note with an empty
    body.

    .. attribute:: store
       :type: termnotes.store.NoteStore
    """
    def __init__(self, store: NoteStore, screen: Screen = None, stdin: TextIO = None, stdout: TextIO = None):
        self.store = store
        self.screen = screen or NullScreen()
        self.stdin = stdin
        self.stdout = stdout

    def _readlines(self):
        stdin = self.stdin or sys.stdin
        for line in stdin:
            yield line.rstrip('\r\n')

    def run(self, note: Note) -> Note:
        """Edits the given note interactively and saves it. Returns the note as saved.

        May raise :exc:`termnotes.store.SaveError`.
        """
        conf = self.store.conf
        out = self.stdout or sys.stdout
        existing = note.user_content

        self.screen.clear()
        print(note.header(conf.separator), file=out)
        print(f'Type {conf.sentinel} on a new line to exit.\n', file=out)
        print(existing, end='', file=out)
        out.flush()

        typed = ''
        for line in self._readlines():
            if line == conf.sentinel:
                break
            typed += line + '\n'

        note = note.with_body(existing + typed, conf.separator)
        self.store.save(note)
        return note
