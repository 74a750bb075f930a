"""Command-line interface for termnotes."""


import logging
import sys
from typing import TextIO
from terminaltables import AsciiTable
from termnotes.api import Notes
from termnotes.conf import NotesConf
from termnotes.editor import EditorSession
from termnotes.models import Command, is_valid_title
from termnotes.screen import Screen, NullScreen, default_screen
from termnotes.store import Error


COMMANDS = [
    ('new [note]', 'Create a new note.'),
    ('app [note]', 'Append to an existing note.'),
    ('ow [note]', 'Overwrite an existing note.'),
    ('del [note]', 'Delete an existing note.'),
    ('list', 'List all saved notes.'),
    ('help', 'Show this summary.'),
    ('cls', 'Clear the screen.'),
    ('exit', 'Exit the program.'),
]

ARG_COMMANDS = ('del', 'new', 'app', 'ow')


class Shell:
    """The interactive prompt: reads one command per line and runs it, until ``exit`` or end of input.

    .. attribute:: notes
       :type: termnotes.api.Notes
    """
    def __init__(self, notes: Notes, stdin: TextIO = None, stdout: TextIO = None, screen: Screen = None):
        self.notes = notes
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.screen = screen or NullScreen()

    def _print(self, *args, **kwargs):
        print(*args, file=self.stdout, **kwargs)

    def _report(self, message: str):
        self._print(message + '\n')

    def _help(self):
        table = AsciiTable([('Command', 'Description')] + COMMANDS)
        self._print(table.table + '\n')

    def _list(self):
        try:
            names = self.notes.list()
        except Error as e:
            self._report(f'ERROR: {e.message}')
            return
        if not names:
            self._report('No files found.')
            return
        for name in names:
            self._print(name)
        self._print()

    def _edit(self, fn, title: str):
        try:
            note = fn(title)
        except Error as e:
            self._report(f'ERROR: {e.message}')
            return
        self._report(f'{note.name} successfully saved!')

    def _delete(self, title: str):
        try:
            self.notes.delete(title)
        except Error as e:
            self._report(f'ERROR: {e.message}')
            return
        self._report(f'{title} successfully deleted!')

    def dispatch(self, line: str) -> bool:
        """Runs one line of input. Returns False if the loop should stop."""
        conf = self.notes.conf
        cmd = Command.parse(line)

        if line == 'exit':
            return False
        elif line == 'help':
            self._help()
        elif line == 'cls':
            self.screen.clear()
        elif line == 'list':
            self._list()
        # everything below needs the argument to be usable as a filename
        elif cmd.word_count == 2 and not is_valid_title(cmd.arg, conf.reserved_chars, conf.max_title_length):
            self._report(f"'{cmd.arg}' is not a valid filename.")
        elif line.startswith('del ') and cmd.word_count == 2:
            self._delete(cmd.arg)
        elif line.startswith('new ') and cmd.word_count == 2:
            self._edit(self.notes.create, cmd.arg)
        elif line.startswith('app ') and cmd.word_count == 2:
            self._edit(self.notes.append, cmd.arg)
        elif line.startswith('ow ') and cmd.word_count == 2:
            self._edit(self.notes.overwrite, cmd.arg)
        elif line.startswith(ARG_COMMANDS):
            self._report('ERROR: Missing argument (filename).')
        else:
            self._report(f"'{line}' is not a valid command.")
        return True

    def run(self) -> None:
        self._print('Welcome to termnotes!')
        self._print('Enter a command (new | app | ow | list | del | help | cls | exit)\n')
        while True:
            self._print(self.notes.conf.prompt, end='')
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                # end of input behaves like exit
                self._print()
                break
            if not self.dispatch(line.rstrip('\r\n')):
                break


def main(args=None) -> int:
    """Runs the interactive prompt and returns its exit code.

    The program takes no command-line arguments; ``args`` is accepted for symmetry with other entry points
    and ignored.
    """
    conf = NotesConf.for_user()
    logging.basicConfig(stream=sys.stderr, level=conf.log_level,
                        format='%(levelname)s %(name)s: %(message)s')
    screen = default_screen() if sys.stdin.isatty() else NullScreen()
    notes = conf.instantiate()
    notes.editor = EditorSession(notes.store, screen=screen)
    try:
        notes.store.ensure_dir()
    except OSError as e:
        print(f'ERROR: Could not create save directory {notes.conf.save_dir}: {e}', file=sys.stderr)
        return 1
    with notes:
        Shell(notes, screen=screen).run()
    return 0
