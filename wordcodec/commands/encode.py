"""Encode bytes (as hex) or a 32-bit unsigned integer as words.

Hex input may carry a 0x prefix and may be split over several arguments;
whitespace is ignored. With --u32 the value is parsed as an integer
(decimal, or 0x/0o/0b prefixed) and encoded big-endian with leading zero
bytes dropped, so small numbers give fewer words.

Example:
    wordcodec encode deadbeef
    wordcodec encode --u32 1234
    wordcodec encode --u32 0xDEADBEEF --json
"""

from wordcodec.codec import encode_bytes, encode_u32
from wordcodec.core.types import Command, Result
from wordcodec.core.wordlist import Wordlist

command = Command(
    name='encode',
    help='Encode hex bytes or an integer (--u32) as words.',
)


def parse_hex(parts: list[str]) -> bytes:
    """Join hex fragments into bytes. Raises ValueError on bad hex."""
    text = ''.join(''.join(parts).split())
    if text[:2].lower() == '0x':
        text = text[2:]
    return bytes.fromhex(text)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('value', nargs='+', help='Hex bytes, or an integer with --u32')
    parser.add_argument('-u', '--u32', action='store_true', help='Treat value as a 32-bit unsigned integer')


@command.run
def run(args, wordlist: Wordlist, result: Result) -> None:
    try:
        if args.u32:
            if len(args.value) != 1:
                raise ValueError('--u32 takes exactly one value')
            num = int(args.value[0], 0)
            words = encode_u32(num, wordlist)
            result.add('value', num)
        else:
            data = parse_hex(args.value)
            words = encode_bytes(data, wordlist)
            result.add('hex', data.hex())
    except ValueError as e:
        result.fail(str(e))
        return
    result.add('words', words)
