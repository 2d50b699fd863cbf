"""Loading of shader source files."""

from __future__ import annotations

import os


def read_shader_source(path: str | os.PathLike[str]) -> str:
    """Return the shader text at ``path`` with every line newline-terminated.

    Each line read is followed by a newline, including the empty line after
    a final line break, so the result always ends with an extra newline.
    Raises ``FileNotFoundError`` if the file does not exist.
    """
    with open(path, encoding="utf-8", newline="") as stream:
        content = stream.read()
    return content + "\n"