import string

ALPHABET = string.ascii_lowercase
ALPHABET_LENGTH = len(ALPHABET)

# letter -> slot, 'a' is 0
POSITIONS = {c: i for i, c in enumerate(ALPHABET)}

# open office dictionaries append inflection/pronunciation info after these
ANNOTATIONS = "'/"


class IneligibleWord(ValueError):
    """
    word contains a character outside a-z
    """


class InvalidTokens(ValueError):
    pass


def position(c):
    try:
        return POSITIONS[c]
    except KeyError:
        raise IneligibleWord(f"unsupported character: {c!r} (use a-z)") from None


def histogram(word):
    """
    count how many times each letter appears in word
    counts[0] is the number of a's, counts[25] the number of z's
    """
    counts = [0] * ALPHABET_LENGTH

    for c in word:
        counts[position(c)] += 1

    return tuple(counts)


def signature(word):
    """
    bitmask of the letters in word, bit 0 is 'a'
    ignores how many times a letter appears so it can only rule words out
    """
    bits = 0

    for c in word:
        bits |= 1 << position(c)

    return bits


def is_subset(bits, of):
    return bits & ~of == 0


def fits(counts, available):
    """
    True if no letter is needed more often than it is available
    """
    return all(n <= m for n, m in zip(counts, available))


def strip_annotation(line):
    # first apostrophe wins, a slash only counts when there is no apostrophe
    for delim in ANNOTATIONS:
        pos = line.find(delim)
        if pos >= 0:
            return line[:pos]

    return line


def normalize(line):
    """
    turn a raw dictionary line into a lowercase word

    returns None if the line can never be a word: empty, a proper noun,
    a numeral or anything with a non a-z character once the annotation is gone.
    An annotation starting at the first character leaves '', which is a valid
    (if useless) word and not the same thing as None.
    """
    line = line.rstrip('\r\n')

    if not line or line[0].isupper() or line[0].isdigit():
        return None

    word = strip_annotation(line)

    # some non ascii letters lowercase to ascii ones, eg. the kelvin sign
    if not word.isascii():
        return None

    word = word.lower()

    if not all(c in POSITIONS for c in word):
        return None

    return word


class Tokens:
    """
    the letters we're allowed to spell with
    """

    def __init__(self, letters):
        # no letters is allowed, it just can't spell anything
        bad = sorted(set(c for c in letters if not c.isascii() or c.lower() not in POSITIONS))
        if bad:
            raise InvalidTokens(f"letters must be a-z, got: {''.join(bad)}")

        letters = letters.lower()

        self._letters   = letters
        self._histogram = histogram(letters)
        self._signature = signature(letters)

    @property
    def letters(self):
        return self._letters

    @property
    def histogram(self):
        return self._histogram

    @property
    def signature(self):
        return self._signature

    @property
    def length(self):
        return len(self._letters)

    def __len__(self):
        return self.length

    def __repr__(self):
        return f"Tokens({self.letters!r})"

    def could_contain(self, word):
        """
        cheap check, True if word only uses letters we have and isn't too long
        """
        if len(word) > self.length:
            return False

        bits = signature(word)
        return bits != 0 and is_subset(bits, self.signature)

    def can_spell(self, word):
        """
        exact check, True if every letter of word is available often enough
        """
        # only count letters if it might fit
        if not self.could_contain(word):
            return False

        return fits(histogram(word), self.histogram)
