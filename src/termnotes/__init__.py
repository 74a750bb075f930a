"""Keeps short notes as plain text files, edited one line at a time from the terminal.

If you installed via ``pip``, run ``termnotes`` to start the prompt and type ``help``.

To use the Python API, look at :class:`termnotes.api.Notes`
"""
