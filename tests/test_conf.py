import os.path
import pytest
from termnotes.api import Notes
from termnotes.conf import NotesConf


def test_defaults():
    conf = NotesConf()
    assert conf.save_dir == 'savedNotes'
    assert conf.extension == '.cppn'
    assert conf.separator == ' | '
    assert conf.sentinel == '!quit'
    assert conf.prompt == '$~ '
    assert conf.max_title_length == 255


def test_for_user_no_file(fs):
    assert NotesConf.for_user() == NotesConf()


def test_for_user_bad_file(fs):
    fs.create_file(os.path.expanduser('~/.termnotes.conf.py'), contents='config = 5')
    with pytest.raises(Exception, match=r'You need to assign an instance of NotesConf to the variable `conf`'):
        NotesConf.for_user()


def test_standardize(fs):
    fs.cwd = '/work'
    fs.create_dir('/work')
    assert NotesConf().standardize().save_dir == '/work/savedNotes'
    assert NotesConf(save_dir='/abs').standardize().save_dir == '/abs'


def test_instantiate(fs):
    fs.cwd = '/work'
    fs.create_dir('/work')
    notes = NotesConf(extension='.txt').instantiate()
    assert isinstance(notes, Notes)
    assert notes.store.path_for('a') == '/work/savedNotes/a.txt'
