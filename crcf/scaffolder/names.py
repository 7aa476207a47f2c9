"""Name helpers for component arguments.

A component argument may carry a path prefix (``forms/Input`` or
``forms\\Input``).  These helpers split such an argument into its parent
prefix and bare component name, and derive the capitalised forms used for
filenames and JavaScript identifiers.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

# Both separators are always accepted, whatever the host platform.
_SEPARATORS = frozenset({"/", "\\", os.sep})


def _last_separator(path_like: str) -> int:
    return max(path_like.rfind(sep) for sep in _SEPARATORS)


def bare_name(path_like: str) -> str:
    """Return the component name after the last path separator.

    Examples::

        bare_name("Button")          -> "Button"
        bare_name("forms/Input")     -> "Input"
        bare_name("forms\\\\Input")    -> "Input"
        bare_name("forms/")          -> ""
    """
    return path_like[_last_separator(path_like) + 1:]


def parent_prefix(path_like: str) -> str:
    """Return everything up to and including the last separator ("" if none)."""
    return path_like[: _last_separator(path_like) + 1]


def capitalize(token: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    Unlike ``str.capitalize`` this never lowercases the tail, so
    ``capitalize("myButton") == "MyButton"``.
    """
    return token[:1].upper() + token[1:]


def to_identifier(name: str) -> str:
    """Convert a component name to a JavaScript component identifier.

    Separator characters are dropped and the following word capitalised::

        to_identifier("button")      -> "Button"
        to_identifier("my-button")   -> "MyButton"
        to_identifier("date_picker") -> "DatePicker"
    """
    parts = re.split(r"[^0-9A-Za-z_$]+|_", name)
    identifier = "".join(capitalize(part) for part in parts if part)
    if identifier[:1].isdigit():
        identifier = f"_{identifier}"
    return identifier


def under_root(root: str | Path, path_like: str) -> Path:
    """Join *path_like* onto *root*, treating an absolute path as relative.

    ``under_root("/work", "/tmp/Card") == Path("/work/tmp/Card")``; the result
    never escapes *root* through a leading anchor.
    """
    relative = Path(path_like.replace("\\", "/"))
    if relative.anchor:
        relative = relative.relative_to(relative.anchor)
    return Path(root) / relative
