"""Deterministic cache key derivation.

Keys are the compact JSON encoding of the ordered parameter list. JSON keeps
argument boundaries explicit, so ``("ab", "c")`` and ``("a", "bc")`` map to
``'["ab","c"]'`` and ``'["a","bc"]'`` instead of colliding the way a plain
string join would.
"""

import json
import math
from collections.abc import Sequence
from typing import Any

_SCALARS = (str, int, float, bool, type(None))


def _normalize(part: Any) -> Any:
    if isinstance(part, float) and not math.isfinite(part):
        raise TypeError(f"Cache key parts must be finite numbers, got {part!r}")
    if isinstance(part, _SCALARS):
        return part
    if isinstance(part, Sequence) and not isinstance(part, (bytes, bytearray)):
        return [_normalize(item) for item in part]
    raise TypeError(f"Cache key parts must be scalars or sequences of scalars, got {type(part).__name__}")


def derive_cache_key(*parts: Any) -> str:
    """Build an opaque cache key from ordered semantic parameters.

    Args:
        *parts: Operation name followed by subject identifiers (job title,
            company, industry, skills list, ...). Tuples and lists encode
            identically.

    Returns:
        A string key; equal inputs always produce equal keys

    Raises:
        TypeError: If a part is not a scalar or a sequence of scalars, or is
            a NaN or infinite float

    Example:
        ```python
        derive_cache_key("quiz", "Data Science", ["Python", "SQL"])
        # '["quiz","Data Science",["Python","SQL"]]'
        ```
    """
    return json.dumps(
        [_normalize(part) for part in parts],
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )
