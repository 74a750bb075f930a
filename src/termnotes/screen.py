"""Clears the terminal display in whatever way the current platform supports."""

import logging
import os
import subprocess
from typing import List


logger = logging.getLogger(__name__)


class Screen:
    """Base class for things that can clear the user's display."""
    def clear(self) -> None:
        raise NotImplementedError()


class NullScreen(Screen):
    """Leaves the display alone. Useful for tests and for input that is not coming from a terminal."""
    def clear(self) -> None:
        pass


class CommandScreen(Screen):
    """Clears the display by running an external command such as ``clear``."""
    def __init__(self, command: List[str], shell: bool = False):
        self.command = command
        self.shell = shell

    def clear(self) -> None:
        try:
            subprocess.run(self.command, shell=self.shell, check=False)
        except OSError as e:
            logger.debug('Could not clear screen with %s: %s', self.command, e)


def default_screen() -> Screen:
    """Returns a :class:`Screen` appropriate for the running operating system."""
    if os.name == 'nt':
        # cls is a cmd.exe builtin, not an executable
        return CommandScreen(['cls'], shell=True)
    return CommandScreen(['clear'])
