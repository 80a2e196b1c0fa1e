"""Dynamic segment detection, positional matching, and parameter sanitizing.

Parameters are always delivered to handlers as sanitized strings.
Converting ``"42"`` to an ``int`` (and rejecting ``"abc"``) is the
handler's job.
"""

import html
import string

from waypost.routing.route import is_param_segment

# Characters that survive URL filtering. Everything else (whitespace,
# control characters, non-ASCII) is dropped before HTML escaping.
URL_SAFE_CHARS: frozenset[str] = frozenset(
    string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&="
)


def has_params(path: str) -> bool:
    """Whether *path* contains a ``{`` that opens before the first ``}``.

    This is the only well-formedness check made at registration time:
    ``/items/{}`` counts as dynamic, ``/items/}{`` does not.
    """
    opening = path.find("{")
    closing = path.find("}")
    return opening != -1 and closing != -1 and opening < closing


def match_segments(pattern_segments: tuple[str, ...], url_segments: list[str]) -> bool:
    """Positionally match a split pattern against split request segments.

    Segment counts must be equal. Placeholders match any value,
    including the empty string; literal segments must be identical.
    """
    if len(pattern_segments) != len(url_segments):
        return False
    for part, value in zip(pattern_segments, url_segments, strict=True):
        if is_param_segment(part):
            continue
        if part != value:
            return False
    return True


def sanitize_param(value: str) -> str:
    """Strip characters invalid in a URL, then HTML-escape the rest.

    Quotes are escaped along with ``&``, ``<`` and ``>``::

        >>> sanitize_param("<b>hi there</b>")
        '&lt;b&gt;hithere&lt;/b&gt;'
    """
    filtered = "".join(ch for ch in value if ch in URL_SAFE_CHARS)
    return html.escape(filtered, quote=True)


def extract_params(pattern_segments: tuple[str, ...], url_segments: list[str]) -> list[str]:
    """Return sanitized values for each placeholder, left to right.

    Assumes ``match_segments()`` already succeeded for these inputs.
    """
    return [
        sanitize_param(url_segments[i])
        for i, part in enumerate(pattern_segments)
        if is_param_segment(part)
    ]
