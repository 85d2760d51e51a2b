import pathlib
import logging

import click

from rich.console import Console
print = Console(color_system='truecolor', highlight=False, soft_wrap=True).print

logger = logging.getLogger(__name__)

from wordplay.letters import Tokens, InvalidTokens
from wordplay.index import BucketIndex
from wordplay.matcher import Matcher
from wordplay.signals import signals
from wordplay.utils import dotdict, read_lines

USAGE_ERROR = 1
OPEN_ERROR  = 2


class MatcherUI:

    def __init__(self, args):
        args = dotdict(args)

        self.args   = args
        self.tokens = Tokens(args.tokens)

    def read_index(self, lines):
        return BucketIndex.from_lines(
            self.tokens,
            lines,
            min_length=self.args.min_length,
            verify=self.args.stream,
        )

    def cb_admitted(self, sender, data):
        logger.debug(f"admitted: {data}")

    def cb_index_built(self, sender, data):
        for length, n in data.items():
            logger.debug(f"{length} letter candidates: {n}")

    def cb_matched(self, sender, data):
        if not self.args.count:
            print(data, markup=False)

    def solve(self, lines):
        """
        print every word in lines that can be spelled with our tokens,
        then the total
        """
        with signals.word_admitted.connected_to(self.cb_admitted), \
             signals.index_built.connected_to(self.cb_index_built):
            index = self.read_index(lines)

        matcher = Matcher(self.tokens, index, sort=self.args.sort)

        with signals.word_matched.connected_to(self.cb_matched, sender=matcher):
            total = matcher.run()

        print(f"Total matches: {total}")
        return total


@click.command()
@click.option('--min', 'min_length', default=1, type=click.IntRange(min=1), help="ignore words shorter than this")
@click.option('--sort', is_flag=True, help="sort words alphabetically within each length")
@click.option('--count', is_flag=True, help="only show the number of matches")
@click.option('--stream', is_flag=True, help="check letter counts while reading the dictionary")
@click.option('--encoding', default='utf-8', show_default=True, help="dictionary file encoding")
@click.option('-v', '--verbose', is_flag=True, help="show dictionary statistics")
@click.argument('tokens', required=False)
@click.argument('dict', required=False, type=click.Path(path_type=pathlib.Path))
@click.argument('extra', nargs=-1, required=False)
@click.pass_context
def cli(ctx, *_, **args):
    """
    find all words in DICT that can be spelled with the letters in TOKENS

    each letter can be used as many times as it appears in TOKENS. DICT is a
    word list with one word per line, OpenOffice style annotations (cat/S,
    cat's) are ignored as are proper nouns and numbers.
    Anything after DICT is ignored.
    """

    level = logging.DEBUG if args['verbose'] else logging.WARNING
    logging.basicConfig(format='%(message)s', level=level)
    logging.getLogger('wordplay').setLevel(level)

    if args['tokens'] is None or args['dict'] is None:
        print("Please include the characters in the problem and the dictionary file")
        ctx.exit(USAGE_ERROR)

    try:
        ui = MatcherUI(args)
    except InvalidTokens as e:
        print(f"Invalid characters: {e}", markup=False)
        ctx.exit(USAGE_ERROR)

    try:
        lines = read_lines(args['dict'], args['encoding'])
    except LookupError:
        print(f"Unknown encoding: {args['encoding']}", markup=False)
        ctx.exit(USAGE_ERROR)
    except OSError as e:
        logger.debug(f"can't open {args['dict']}: {e}")
        print("Error opening file")
        ctx.exit(OPEN_ERROR)

    try:
        ui.solve(lines)
    except KeyboardInterrupt:
        pass
