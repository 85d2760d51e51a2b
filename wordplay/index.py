import logging
logger = logging.getLogger(__name__)

from .letters import normalize
from .signals import signals


class BucketIndex:
    """
    dictionary words that might be spelled with the tokens, grouped by length

    A word is only stored if it is no longer than the tokens and every letter
    in it is somewhere in the tokens. That says nothing about how many times a
    letter is needed so a stored word is a candidate, not a match. With
    verify=True the letter counts are checked on the way in as well and the
    index only ever holds matches.
    """

    def __init__(self, tokens, min_length=1, verify=False):
        self.tokens     = tokens
        self.min_length = max(min_length, 1)
        self.verify     = verify

        # length -> {word: None}, a dict keeps insertion order and drops duplicates
        self.buckets = {}

        self.lines    = 0     # dictionary lines seen
        self.rejected = 0     # lines that can never match

    @classmethod
    def from_lines(cls, tokens, lines, **kw):
        index = cls(tokens, **kw)
        return index.build(lines)

    def add(self, line):
        """
        consider one dictionary line, return the stored word or None
        """
        self.lines += 1
        word = normalize(line)

        if word is None:        # proper noun, numeral or junk
            self.rejected += 1
            return None

        if len(word) < self.min_length:
            self.rejected += 1
            return None

        # too long, empty or has a letter that isn't in the tokens at all
        if not self.tokens.could_contain(word):
            self.rejected += 1
            return None

        if self.verify and not self.tokens.can_spell(word):
            self.rejected += 1
            return None

        bucket = self.buckets.setdefault(len(word), {})
        if word not in bucket:
            bucket[word] = None
            signals.word_admitted.send(self, data=word)

        return word

    def build(self, lines):
        for line in lines:
            self.add(line)

        logger.debug(f"dictionary contains {self.lines} lines, {self.rejected} can't be spelled")
        logger.debug(f"our index contains {len(self)} words")
        signals.index_built.send(self, data=self.sizes())

        return self

    def sizes(self):
        return {length: len(self.buckets[length]) for length in self.lengths()}

    def lengths(self):
        return sorted(self.buckets)

    def __getitem__(self, length):
        return list(self.buckets.get(length, ()))

    def __len__(self):
        return sum(len(bucket) for bucket in self.buckets.values())

    def __iter__(self):
        for length in self.lengths():
            yield from self.buckets[length]

    def __contains__(self, word):
        return word in self.buckets.get(len(word), ())
