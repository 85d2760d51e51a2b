import logging
logger = logging.getLogger(__name__)

from .signals import signals


class Matcher:

    def __init__(self, tokens, index, sort=False):
        self.tokens = tokens
        self.index  = index
        self.sort   = sort
        self.total  = 0

    def is_match(self, word):
        """
        the authoritative check, the index only filtered on signature
        """
        return self.tokens.can_spell(word)

    def bucket(self, length):
        words = self.index[length]
        return sorted(words) if self.sort else words

    def matches(self):
        """
        yield every indexed word that can be spelled with the tokens,
        shortest words first
        """
        self.total = 0

        for length in self.index.lengths():
            for word in self.bucket(length):
                if not self.is_match(word):
                    continue

                self.total += 1
                signals.word_matched.send(self, data=word)
                yield word

        logger.debug(f"found {self.total} matches for {self.tokens.letters}")

    def run(self, callback=None):
        for word in self.matches():
            if callback:
                callback(word=word)

        return self.total
