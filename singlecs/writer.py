import os
from typing import Iterable


def save_output(output_file: str, lines: Iterable[str]):
    """Writes `lines` to `output_file`, creating missing directories. Overwrites."""
    output_dir = os.path.dirname(output_file)
    if output_dir and not os.path.isdir(output_dir):
        os.makedirs(output_dir, exist_ok=True)

    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
