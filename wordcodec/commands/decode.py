"""Decode words back into hex bytes or a 32-bit unsigned integer.

Words may be given as separate arguments or as one quoted phrase; any run
of whitespace separates words. Case is ignored.

On failure the error names the 0-based index of the first unknown word.
With --u32, more than four words fails with index 4.

Example:
    wordcodec decode table potato school true
    wordcodec decode --u32 "ant stamp"
"""

from wordcodec.codec import decode_bytes, decode_u32
from wordcodec.core.errors import DecodeError
from wordcodec.core.types import Command, Result
from wordcodec.core.wordlist import Wordlist

command = Command(
    name='decode',
    help='Decode words into hex bytes or an integer (--u32).',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('words', nargs='+', help='Words or a quoted phrase')
    parser.add_argument('-u', '--u32', action='store_true', help='Decode to a 32-bit unsigned integer')


@command.run
def run(args, wordlist: Wordlist, result: Result) -> None:
    words = [w for arg in args.words for w in arg.split()]
    result.add('words', words)
    try:
        if args.u32:
            num = decode_u32(words, wordlist)
            result.add('value', num)
            result.add('hex', f'{num:#x}')
        else:
            result.add('hex', decode_bytes(words, wordlist).hex())
    except DecodeError as e:
        result.fail(str(e), index=e.index)
