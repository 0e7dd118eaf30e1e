"""List the bundled word lists, or print the words of the selected one.

Example:
    wordcodec wordlists
    wordcodec --language en wordlists --show
"""

from wordcodec.core.types import Command, Result
from wordcodec.core.wordlist import Wordlist, available_languages

command = Command(
    name='wordlists',
    help='List bundled word lists (--show prints the selected list).',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('-s', '--show', action='store_true', help='Print the 256 words of the selected list')


@command.run
def run(args, wordlist: Wordlist, result: Result) -> None:
    if args.show:
        result.add('words', list(wordlist.words))
    else:
        result.add('languages', available_languages())
