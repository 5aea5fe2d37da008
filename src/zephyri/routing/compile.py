"""Route pattern compilation.

Translates the route pattern syntax into an anchored regular expression::

    "/user/:id"   -> ^/user/(?P<id>[,a-zA-Z0-9%_-]*)(\\?[a-zA-Z0-9%_=&-]*)?\\Z
    "/files/*"    -> ^/files/[,a-zA-Z0-9_-]*(\\?[a-zA-Z0-9%_=&-]*)?\\Z
    "/static/**"  -> ^/static/[,/a-zA-Z0-9_-]*(\\?[a-zA-Z0-9%_=&-]*)?\\Z

Literal text is inserted as-is, so regex metacharacters in a pattern keep
their regex meaning.
"""

import re
from collections.abc import Callable

from zephyri.errors import CompileError

# One segment, no "/"
SINGLE_WILDCARD = "[,a-zA-Z0-9_-]*"
# Any number of segments
DOUBLE_WILDCARD = "[,/a-zA-Z0-9_-]*"
PARAM_VALUE = "[,a-zA-Z0-9%_-]*"
QUERY_SUFFIX = r"(\?[a-zA-Z0-9%_=&-]*)?"

PARAM_TOKEN = re.compile(r":([,a-zA-Z0-9_-]+)")

_PLACEHOLDER = "\x00DOUBLE_WILDCARD\x00"
_REGEX_SPECIALS = re.compile(r"[.*+?^${}()|[\]\\]")


def escape_regexp(text: str) -> str:
    """Backslash-escape regex metacharacters in *text*."""
    return _REGEX_SPECIALS.sub(r"\\\g<0>", text)


def replace_all(text: str, regex: re.Pattern[str], callback: Callable[[str], str]) -> str:
    """Replace every match of *regex* in *text* with ``callback(group(1))``.

    The leftmost match is replaced and the scan restarts, until *regex*
    no longer matches. Replacements are spliced in literally, never
    interpreted as ``re.sub`` templates.
    """
    while (match := regex.search(text)) is not None:
        text = text[: match.start()] + callback(match.group(1)) + text[match.end() :]
    return text


def _named_group(name: str) -> str:
    return f"(?P<{escape_regexp(name)}>{PARAM_VALUE})"


def route_expression(pattern: str) -> str:
    """Build the regex source for *pattern* without compiling it."""
    # Only the first "**" and the first "*" are wildcards.
    replaced = (
        pattern.replace("**", _PLACEHOLDER, 1)
        .replace("*", SINGLE_WILDCARD, 1)
        .replace(_PLACEHOLDER, DOUBLE_WILDCARD, 1)
    )
    with_captures = replace_all(replaced, PARAM_TOKEN, _named_group)
    return f"^{with_captures}{QUERY_SUFFIX}\\Z"


def compile_route(pattern: str) -> re.Pattern[str]:
    """Compile a route pattern to a ``re.Pattern``.

    Raises ``CompileError`` if the generated expression is not a valid
    regular expression, e.g. for a parameter name that is not a valid
    Python group name (``:user-id``, ``:1st``).

    Examples::

        compile_route("/user/:id").fullmatch("/user/42").groupdict()
        # {'id': '42'}

        compile_route("/user/:name/:message").fullmatch("/user/bree/123?x=1")
        # <re.Match ...>, groupdict() == {'name': 'bree', 'message': '123'}
    """
    expression = route_expression(pattern)
    try:
        return re.compile(expression)
    except re.error as exc:
        raise CompileError(pattern, expression, str(exc)) from exc
