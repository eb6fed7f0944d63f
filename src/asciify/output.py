import sys
from pathlib import Path
from typing import TextIO


def write_lines(lines: list[str], stream: TextIO | None = None) -> None:
    stream = stream if stream is not None else sys.stdout
    for line in lines:
        print(line, file=stream)


def save_lines(lines: list[str], path: str | Path) -> None:
    """Write rows to ``path`` separated by newlines, with one trailing newline."""
    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
