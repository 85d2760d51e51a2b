from .letters import (
    Tokens,
    IneligibleWord,
    InvalidTokens,
    normalize,
    histogram,
    signature,
)
from .index import BucketIndex
from .matcher import Matcher

__version__ = '0.1.0'


def find_words(tokens, lines, min_length=1, sort=False, verify=False):
    """
    list every word in lines that can be spelled with tokens, shortest first
    """
    if not isinstance(tokens, Tokens):
        tokens = Tokens(tokens)

    index = BucketIndex.from_lines(tokens, lines, min_length=min_length, verify=verify)
    return list(Matcher(tokens, index, sort=sort).matches())
