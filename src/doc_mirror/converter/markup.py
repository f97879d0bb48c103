import re
from enum import Enum

from doc_mirror.constants import FENCE_MARKER


class FenceState(Enum):
    """Position of a line relative to fenced code blocks."""
    IN_TEXT = 0
    IN_CODE = 1


# A "<" that cannot open a tag, a closing tag or a comment
BARE_LT_PATTERN = re.compile(r'<(?![/a-zA-Z!])')


def is_fence(line: str) -> bool:
    return line.lstrip().startswith(FENCE_MARKER)


def neutralize_markup(text: str) -> str:
    """
    Escape bare "<" characters so the page template does not read them as markup.

    Real tags (<div>, </span>, <!-- -->) are kept. Lines inside fenced code
    blocks pass through untouched. A fence line flips the state before the
    line itself is handled, and an unterminated fence keeps the rest of the
    document in code.
    """
    lines = text.split('\n')
    state = FenceState.IN_TEXT
    result = []

    for line in lines:
        if is_fence(line):
            state = FenceState.IN_TEXT if state is FenceState.IN_CODE else FenceState.IN_CODE

        if state is FenceState.IN_CODE:
            result.append(line)
        else:
            result.append(BARE_LT_PATTERN.sub('&lt;', line))

    return '\n'.join(result)
