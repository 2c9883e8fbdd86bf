from __future__ import annotations

import os


class JekyllWriter:
    """
    Write rendered documents below a Jekyll site directory.

    Parent directories are created as needed and existing files are
    overwritten: every run regenerates the whole site.
    """

    def __init__(self, output_dir: str = ".") -> None:
        self.output_dir = output_dir

    def target(self, path: str) -> str:
        return os.path.join(self.output_dir, *path.split("/"))

    def write(self, path: str, text: str) -> str:
        target = self.target(path)
        os.makedirs(os.path.dirname(target) or ".", exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return target
