"""No space left on device: sizing directories from a terminal transcript."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

TOTAL_SPACE = 70_000_000
REQUIRED_SPACE = 30_000_000
SMALL_DIRECTORY_LIMIT = 100_000

_DIR_RE = re.compile(r"dir (?P<name>.*)")
_FILE_RE = re.compile(r"(?P<size>[0-9]*) (?P<name>.*)")
_CD_RE = re.compile(r"^\$ cd ([^\n]*)")


@dataclass
class File:
    """A file with its size."""

    name: str
    size: int


@dataclass
class Directory:
    """A directory holding files and directories; ``size`` is the total below it."""

    name: str
    items: list[File | Directory] = field(default_factory=list)
    size: int = 0

    def add_item(self, path: str, item: File | Directory) -> None:
        """Add ``item`` to the directory reached by ``path``, updating sizes on the way."""
        self.size += item.size
        if self.name == path:
            self.items.append(item)
            return
        if not path.startswith(self.name):
            raise ValueError(f"path {path!r} does not lie under {self.name!r}")
        rest = path[len(self.name):]
        if not rest.startswith("/"):
            raise ValueError(f"path {path!r} does not lie under {self.name!r}")
        rest = rest[1:]
        for sub_item in self.items:
            if isinstance(sub_item, Directory) and rest.startswith(sub_item.name):
                sub_item.add_item(rest, item)
                break

    def _directories(self):
        return (item for item in self.items if isinstance(item, Directory))

    def small_directories_total(self) -> int:
        """Sum the sizes of every directory smaller than the limit, nested ones included."""
        total = self.size if self.size < SMALL_DIRECTORY_LIMIT else 0
        return total + sum(sub.small_directories_total() for sub in self._directories())

    def smallest_directory_larger_than(self, min_size: int) -> int:
        """Size of the smallest directory below this one that is larger than ``min_size``.

        Falls back to this directory's own size.
        """
        return self._smallest_larger_than(min_size, self.size)

    def _smallest_larger_than(self, min_size: int, current_best: int) -> int:
        for sub in self._directories():
            if min_size < sub.size < current_best:
                current_best = sub.size
            current_best = sub._smallest_larger_than(min_size, current_best)
        return current_best


def parse_entry(line: str) -> File | Directory:
    """Parse one line of ``ls`` output."""
    if line.startswith("dir"):
        match = _DIR_RE.search(line)
        if match is None:
            raise ValueError(f"invalid directory entry: {line!r}")
        return Directory(match.group("name"))
    match = _FILE_RE.search(line)
    if match is None or not match.group("size"):
        raise ValueError(f"invalid file entry: {line!r}")
    return File(match.group("name"), int(match.group("size")))


def parse_input(text: str) -> Directory:
    """Rebuild the file system tree from a terminal transcript."""
    cur_dir: list[str] = []
    ls_active = False
    root = Directory("/")
    for line in text.strip().split("\n"):
        if line.startswith("$"):
            ls_active = False
        if ls_active:
            root.add_item("/".join(cur_dir), parse_entry(line))
        elif (match := _CD_RE.search(line)) is not None:
            dir_name = match.group(1)
            if dir_name == "..":
                if cur_dir:
                    cur_dir.pop()
            else:
                cur_dir.append(dir_name)
        elif line == "$ ls":
            ls_active = True
    return root


def solve_part_1(fs: Directory) -> int:
    return fs.small_directories_total()


def solve_part_2(fs: Directory) -> int:
    space_free = TOTAL_SPACE - fs.size
    min_size = REQUIRED_SPACE - space_free
    return fs.smallest_directory_larger_than(min_size)


def solve(text: str) -> tuple[int, int]:
    """Solve both parts of the puzzle."""
    fs = parse_input(text)
    return solve_part_1(fs), solve_part_2(fs)