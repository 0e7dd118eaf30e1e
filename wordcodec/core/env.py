"""Configuration for wordcodec: environment variables and .env files.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Variables:
  WORDCODEC_LANGUAGE   bundled word list name (default: en)
  WORDCODEC_WORDLIST   path to a custom word list file, wins over the language
  WORDCODEC_LOG_LEVEL  logging level for the CLI (default: WARNING)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from wordcodec.core.wordlist import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WORDCODEC_'
DEFAULT_LOG_LEVEL = 'WARNING'


def _find_dotenv(start: Path) -> Path | None:
    """Return the nearest .env at or above start, without crossing a .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git is a dir in a normal clone and a file in a worktree
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values and a leading 'export ' are dropped."""
    result: dict[str, str] = {}
    for raw_line in path.read_text(encoding='utf-8').splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env entries into os.environ for keys not already set.

    Returns the file that was loaded, or None if none was found or used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.debug('env file not found: %s', env_file)
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    logger.debug('Loaded %s', path)
    return path


@dataclass(frozen=True)
class Settings:
    """Resolved wordcodec configuration."""

    language: str = DEFAULT_LANGUAGE
    wordlist_path: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def wordlist_source(self) -> str:
        """What to hand to load_wordlist: the custom file if set, else the language."""
        return self.wordlist_path or self.language

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> 'Settings':
        env = os.environ if environ is None else environ
        return cls(
            language=env.get(f'{ENV_PREFIX}LANGUAGE') or DEFAULT_LANGUAGE,
            wordlist_path=env.get(f'{ENV_PREFIX}WORDLIST') or None,
            log_level=(env.get(f'{ENV_PREFIX}LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper(),
        )
