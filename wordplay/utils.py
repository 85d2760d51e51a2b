class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def read_lines(dictpath, encoding='utf-8'):
    """
    return a generator over the lines of a word list, without line endings

    the file is opened right away so a missing or unreadable file raises
    OSError here and not on the first next(). Undecodable bytes are replaced
    which makes that line unusable instead of killing the whole read.
    """
    f = dictpath.open(encoding=encoding, errors='replace', newline='')

    def _lines():
        with f:
            for line in f:
                yield line.rstrip('\r\n')

    return _lines()
