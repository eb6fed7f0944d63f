import shutil
import sys


def get_terminal_width(fallback: int = 80) -> int:
    """Columns of the attached terminal, or ``fallback`` when stdout is not a tty."""
    if not sys.stdout.isatty():
        return fallback
    return shutil.get_terminal_size((fallback, 24)).columns
