"""Splitting of specification strings into a model name and raw tokens."""

from models import GraphSpec

NAME_DELIMITER = "/"
PARAM_DELIMITER = ","


def parse_spec(text: str) -> GraphSpec:
    """Split a specification string such as ``"ba/100,5"``.

    The name ends at the first ``/``; the remainder is split on ``,``. No
    numeric interpretation happens here.

    Args:
        text: Specification string

    Returns:
        GraphSpec holding the stripped name and tokens
    """
    name, delimiter, remainder = text.partition(NAME_DELIMITER)
    if not delimiter:
        return GraphSpec(name=name.strip())

    tokens = tuple(token.strip() for token in remainder.split(PARAM_DELIMITER))
    return GraphSpec(name=name.strip(), tokens=tokens)
