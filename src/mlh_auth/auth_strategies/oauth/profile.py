# auth_strategies/oauth/profile.py
"""
Helpers for the MyMLH profile request and response.

build_profile_url()       profile endpoint + expand[] query string
normalize_profile_data()  deep copy of the decoded JSON body, {} for anything
                          that is not an object or an array
profile_mapping()         index-keyed dict for a top-level array
"""

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from mlh_auth.auth_strategies.constants import EXPAND_PARAM

# Characters left unescaped by JavaScript's encodeURIComponent
_UNRESERVED = "-_.!~*'()"


def build_profile_url(base_url: str, expand_fields: Sequence[str]) -> str:
    """
    Append one ``expand[]=<field>`` pair per requested field, in order.

    Returns base_url untouched when no fields are requested.
    """
    if not expand_fields:
        return base_url

    expand_query = "&".join(
        f"{EXPAND_PARAM}={quote(str(field), safe=_UNRESERVED)}" for field in expand_fields
    )
    return f"{base_url}?{expand_query}"


def deep_copy_json(value: Any) -> Any:
    """
    Copy nested lists and dicts; leaves are returned as they are.

    Walks with an explicit stack so arbitrarily deep payloads cannot hit the
    interpreter recursion limit.
    """
    if not isinstance(value, dict | list):
        return value

    root: dict[str, Any] | list[Any] = [] if isinstance(value, list) else {}
    stack = [(value, root)]
    while stack:
        source, target = stack.pop()
        items = enumerate(source) if isinstance(source, list) else source.items()
        for key, item in items:
            if isinstance(item, dict | list):
                copied: Any = [] if isinstance(item, list) else {}
                stack.append((item, copied))
            else:
                copied = item

            if isinstance(target, list):
                target.append(copied)
            else:
                target[key] = copied

    return root


def normalize_profile_data(value: Any) -> dict[str, Any] | list[Any]:
    """
    Normalize a decoded profile response.

    Objects and arrays are deep-copied. Anything else (None, a bare string or
    number, a missing body) becomes an empty dict so callers can always treat
    the result as a container.
    """
    if not isinstance(value, dict | list):
        return {}
    return deep_copy_json(value)


def profile_mapping(data: dict[str, Any] | list[Any]) -> dict[str, Any]:
    """
    View normalized profile data as a mapping.

    A top-level array is keyed by its indexes ("0", "1", ...), the same shape
    an object spread over an array produces.
    """
    if isinstance(data, list):
        return {str(index): item for index, item in enumerate(data)}
    return data
