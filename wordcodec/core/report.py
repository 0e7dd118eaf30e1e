"""Report builder — text and JSON output for wordcodec results."""

import json
from typing import Any

from wordcodec.core.types import Result


def format_text(result: Result) -> str:
    """Format a result as plain text, the way a person would copy it."""
    if not result.ok:
        err = result.error or {}
        if 'index' in err:
            return f'error: {err["message"]} (index {err["index"]})'
        return f'error: {err.get("message", "unknown error")}'

    data = result.data
    if 'words' in data and result.command == 'encode':
        return ' '.join(data['words'])
    if 'value' in data:
        return str(data['value'])
    if 'hex' in data:
        return data['hex']
    if 'languages' in data:
        return '\n'.join(data['languages'])
    if 'words' in data:
        return '\n'.join(data['words'])

    # Generic fallback
    return '\n'.join(f'{k}: {v}' for k, v in data.items())


def format_json(result: Result) -> str:
    """Format a result as JSON."""
    obj: dict[str, Any] = {
        'command': result.command,
        'wordlist': result.wordlist,
        'ok': result.ok,
    }
    obj.update(result.data)
    if result.error is not None:
        obj['error'] = result.error
    return json.dumps(obj, indent=2)
