import logging
import os
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from .context import ParsedFile, SourceContext

logger = logging.getLogger("singlecs.sources")


@dataclass(frozen=True)
class SourceItem:
    """A source file as enumerated from the project; it may not exist."""
    path: str

    @property
    def file_name(self) -> str:
        return os.path.basename(self.path)


@dataclass(frozen=True)
class SourceFile:
    path: str
    raw_lines: Tuple[str, ...]


@dataclass(frozen=True)
class Loaded:
    file: ParsedFile


@dataclass(frozen=True)
class SkippedMissing:
    path: str

    @property
    def warning(self) -> str:
        return f"Source file not found: {self.path}"


LoadResult = Union[Loaded, SkippedMissing]


def order_source_files(items: Sequence[SourceItem], entry_point_name: str) -> List[SourceItem]:
    """
    Moves the entry-point file to the end, keeping the order of the rest.

    Only the first file named `entry_point_name` (case-insensitive) is
    moved; any later match keeps its position.
    """
    ordered = list(items)
    wanted = entry_point_name.lower()
    for index, item in enumerate(ordered):
        if item.file_name.lower() == wanted:
            ordered.append(ordered.pop(index))
            break
    return ordered


def trim_body(lines: Sequence[str]) -> List[str]:
    """Removes blank lines at the beginning and the end."""
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return list(lines[start:end])


def read_source_file(path: str) -> SourceFile:
    # utf-8-sig drops a BOM; universal newlines handle \r\n and \r.
    with open(path, "r", encoding="utf-8-sig") as f:
        lines = tuple(line.rstrip("\n") for line in f)
    return SourceFile(path=path, raw_lines=lines)


def load_source(item: SourceItem, context: SourceContext) -> LoadResult:
    """Reads one file into `context`. I/O and decoding errors propagate."""
    if not os.path.isfile(item.path):
        return SkippedMissing(item.path)

    source = read_source_file(item.path)
    body_lines = trim_body(context.add_lines(source.raw_lines))
    parsed = ParsedFile(path=source.path, body_lines=body_lines)
    context.source_files.append(parsed)
    logger.debug(f"Loaded {source.path}: {len(source.raw_lines)} lines, {len(body_lines)} body lines")
    return Loaded(parsed)


def load_sources(items: Iterable[SourceItem], context: SourceContext) -> List[str]:
    """Loads every file into `context` and returns warnings for skipped files."""
    warnings = []
    for item in items:
        result = load_source(item, context)
        if isinstance(result, SkippedMissing):
            logger.warning(result.warning)
            warnings.append(result.warning)
    return warnings
