from __future__ import annotations
from dataclasses import dataclass, replace
import os.path


@dataclass(frozen=True)
class NotesConf:
    """Configures where and how notes are stored, and how the prompt behaves.

    The defaults are used unless the user has a ``~/.termnotes.conf.py`` file; see :meth:`for_user`.
    """

    save_dir: str = 'savedNotes'
    """Folder holding one file per note. Relative paths are resolved against the working directory.

    The folder is created at startup if it does not exist.
    """

    extension: str = '.cppn'
    """Suffix appended to a note's title to get its filename."""

    separator: str = ' | '
    """Separates the name from the timestamp in the first line of a note file."""

    sentinel: str = '!quit'
    """A line consisting of exactly this text ends an editing session."""

    prompt: str = '$~ '

    timestamp_format: str = '%Y-%m-%d [%H:%M]'
    """strftime format used for the creation time recorded in a new note."""

    reserved_chars: str = '<>:"/\\|?*'
    """Characters that may not appear in a note title, since they are illegal in filenames on some platforms."""

    max_title_length: int = 255
    """Titles must be strictly shorter than this."""

    encoding: str = 'utf-8'
    """Text encoding used to read and write note files."""

    log_level: str = 'WARNING'
    """Level for diagnostic logging, which goes to stderr."""

    @classmethod
    def for_user(cls) -> NotesConf:
        """Loads the variable ``conf`` from ``~/.termnotes.conf.py``, or returns the defaults if there is no such file.

        Example config file:

        .. code-block:: python

           from termnotes.conf import NotesConf
           conf = NotesConf(save_dir='/Users/me/notes', extension='.txt')
        """
        path = os.path.expanduser(os.path.join('~', '.termnotes.conf.py'))
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NotesConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> NotesConf:
        return replace(self, save_dir=os.path.abspath(self.save_dir))

    def instantiate(self, editor=None):
        from termnotes.api import Notes
        return Notes(self.standardize(), editor=editor)
