"""Block header attribute parsing and formatting"""

import re


ATTR_RE = re.compile(r'([A-Za-z_][\w-]*)\s*=\s*"([^"]*)"')


def parse_attributes(annotation: str) -> dict[str, str]:
    """Return key="value" pairs from a header annotation; last duplicate wins.

    Pairs may be separated by whitespace or commas. Fragments that do not match
    the pair syntax are dropped without error.
    """
    return {key: value for key, value in ATTR_RE.findall(annotation or '')}


def _clean(value: str) -> str:
    """Replace characters the attribute grammar cannot carry."""
    return value.replace('"', "'").replace('\r', ' ').replace('\n', ' ')


def format_attributes(attrs: dict[str, str | None]) -> str:
    """Render non-None attributes as ' [k="v" ...]', or '' when there are none."""
    pairs = [f'{k}="{_clean(v)}"' for k, v in attrs.items() if v is not None]
    return f" [{' '.join(pairs)}]" if pairs else ""
