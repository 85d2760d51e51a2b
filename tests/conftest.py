import pytest


@pytest.fixture
def dictfile(tmp_path):
    """
    write the given lines to a word list file and return its path
    """
    def _dictfile(lines, name='words.dic', newline='\n'):
        path = tmp_path / name
        path.write_text(newline.join(lines) + newline, encoding='utf-8')
        return path

    return _dictfile


@pytest.fixture
def sample_lines():
    return ["cat", "cats", "act", "Cats", "dog", "ca's"]
