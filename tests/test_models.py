from freezegun import freeze_time
import pytest
from termnotes.models import Note, Command, count_words, current_timestamp, extract_arg, is_valid_title


def test_new_note_has_only_header():
    note = Note.new('groceries', '2012-05-02 [03:04]')
    assert note.content == 'groceries | 2012-05-02 [03:04]\n\n'
    assert note.user_content == ''


def test_new_note_custom_separator():
    assert Note.new('a', 'b', ' :: ').content == 'a :: b\n\n'


def test_user_content_starts_after_first_blank_line():
    note = Note('a', 'ts', 'a | ts\n\nfirst\n\nsecond\n')
    assert note.user_content == 'first\n\nsecond\n'


def test_user_content_without_blank_line():
    assert Note('a', 'ts', 'a | ts\n').user_content == ''


def test_with_body_keeps_name_and_timestamp():
    note = Note.new('a', 'ts')
    updated = note.with_body('hello\n')
    assert updated == Note('a', 'ts', 'a | ts\n\nhello\n')
    assert note.content == 'a | ts\n\n'


def test_note_is_immutable():
    note = Note.new('a', 'ts')
    with pytest.raises(AttributeError):
        note.content = 'changed'


@freeze_time('2012-05-02T03:04:05')
def test_current_timestamp():
    assert current_timestamp() == '2012-05-02 [03:04]'
    assert current_timestamp('%d/%m/%Y') == '02/05/2012'


@pytest.mark.parametrize('c', list('<>:"/\\|?*'))
def test_is_valid_title_rejects_reserved_chars(c):
    assert not is_valid_title(f'my{c}note')
    assert not is_valid_title(c)


def test_is_valid_title_length():
    assert is_valid_title('x' * 254)
    assert not is_valid_title('x' * 255)
    assert not is_valid_title('x' * 1000)


def test_is_valid_title_accepts_others():
    assert is_valid_title('groceries')
    assert is_valid_title('2012-05-02 plans (draft) #1!')
    assert is_valid_title('')
    assert is_valid_title('café \U0001F600')


def test_count_words():
    assert count_words('') == 0
    assert count_words('list') == 1
    assert count_words('new  groceries ') == 2
    assert count_words('new my note') == 3


def test_extract_arg():
    assert extract_arg('list') == ''
    assert extract_arg('new groceries') == 'groceries'
    assert extract_arg('new my note') == 'my note'
    assert extract_arg('new ') == ''


def test_parse_command():
    assert Command.parse('app groceries') == Command('app groceries', 'groceries', 2)
    assert Command.parse('help') == Command('help', '', 1)
    assert Command.parse('del a b') == Command('del a b', 'a b', 3)
