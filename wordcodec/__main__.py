"""wordcodec — Turn bytes and 32-bit integers into words you can read aloud.

Usage: wordcodec [options] <command> [args]

Commands are auto-discovered from wordcodec/commands/.
Each command module's docstring is its documentation.
Run `wordcodec help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, wordcodec looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from wordcodec import registry
from wordcodec.core.env import Settings, load_env
from wordcodec.core.errors import WordlistError
from wordcodec.core.report import format_json, format_text
from wordcodec.core.types import Result
from wordcodec.core.wordlist import load_wordlist

logger = logging.getLogger('wordcodec')


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'wordcodec.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.discover()

    epilog = (
        'Examples:\n'
        '  wordcodec encode deadbeef\n'
        '  wordcodec encode --u32 1234\n'
        '  wordcodec decode table potato school true\n'
        '  wordcodec decode --u32 "ant stamp" --json\n'
        '  wordcodec --wordlist ./my-words.txt encode 00ff\n'
        '  wordcodec wordlists\n'
        '  wordcodec help decode\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  WORDCODEC_LANGUAGE   bundled word list (default: en)\n'
        '  WORDCODEC_WORDLIST   path to a custom 256-word list\n'
        '  WORDCODEC_LOG_LEVEL  DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='wordcodec',
        description='Turn bytes and 32-bit integers into words you can read aloud.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-l', '--language', default=None, help='Bundled word list name (overrides env var)')
    parser.add_argument('-w', '--wordlist', metavar='PATH', default=None, help='Custom word list file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.configure(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _log_level(name: str) -> int:
    """Numeric level for a level name such as 'INFO'; anything unknown is WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging(level: str) -> None:
    logger.setLevel(_log_level(level))
    # Rebind on every run so the handler follows the current sys.stderr
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.discover()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: wordcodec help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    print(doc or f'(No module docs for {topic!r})')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env first; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    settings = Settings.from_env()
    _setup_logging('DEBUG' if args.verbose else settings.log_level)
    if env_path:
        logger.info('loaded %s', env_path)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    # Flags win over env vars; a word list file wins over a language name
    source = args.wordlist or args.language or settings.wordlist_source
    try:
        wordlist = load_wordlist(source)
    except WordlistError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    result = Result(command=args.command, wordlist=wordlist.name)
    registry.get(args.command).execute(args, wordlist, result)

    if args.json:
        print(format_json(result))
    elif result.ok:
        print(format_text(result))
    else:
        print(format_text(result), file=sys.stderr)

    if not result.ok:
        sys.exit(1)


if __name__ == '__main__':
    main()
