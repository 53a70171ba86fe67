import os
from typing import TextIO

MAX_BACKUPS = 9


def rotate_log_file(file_name: str) -> TextIO:
    """Open a fresh, empty log file at file_name.

    An existing file becomes file_name.1 after the numbered backups .1
    through .9 are each shifted up by one (.9 lands on .10, replacing it).
    """
    if os.path.exists(file_name):
        for i in range(MAX_BACKUPS, 0, -1):
            src = f"{file_name}.{i}"
            if os.path.exists(src):
                os.replace(src, f"{file_name}.{i + 1}")
        os.replace(file_name, f"{file_name}.1")
    return open(file_name, "w")
