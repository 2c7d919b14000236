"""
URL helpers for generated call sites.
"""
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def with_query(path: str, query: Optional[Mapping[str, Any]] = None) -> str:
    """Append a form-encoded query string to ``path``.

    ``None`` values are skipped and list/tuple values become repeated keys.
    The path itself is left untouched.
    """
    if not query:
        return path

    pairs: List[Tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _stringify(v)) for v in value if v is not None)
        else:
            pairs.append((key, _stringify(value)))

    if not pairs:
        return path
    return f"{path}?{urlencode(pairs)}"
