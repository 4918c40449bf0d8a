from dataclasses import dataclass, field
from typing import Iterable, List, Set

from .classifier import ImportStatement, LineKind, classify_line


def is_internal_import(identifier: str, namespaces: Iterable[str]) -> bool:
    """
    True if `identifier` names one of `namespaces` or a sub-namespace of it.

    The prefix test is anchored at a dot, so `Foobar.Thing` is not internal
    to `Foo`.
    """
    for ns in namespaces:
        if identifier == ns or identifier.startswith(ns + "."):
            return True
    return False


@dataclass
class ParsedFile:
    path: str
    body_lines: List[str]


@dataclass
class SourceContext:
    """
    State of one merge run: imports and namespaces gathered from every
    loaded file, and the parsed files in load order.

    A new context is created for every run.
    """
    imports: Set[ImportStatement] = field(default_factory=set)
    namespaces: Set[str] = field(default_factory=set)
    source_files: List[ParsedFile] = field(default_factory=list)

    def add_namespace(self, namespace: str):
        if namespace:
            self.namespaces.add(namespace)

    def add_lines(self, lines: Iterable[str]) -> List[str]:
        """
        Records the imports and namespaces of one file and returns its
        body lines in source order.
        """
        body_lines = []
        for line in lines:
            classified = classify_line(line)
            if classified.kind is LineKind.IMPORT:
                self.imports.add(classified.statement)
            elif classified.kind is LineKind.NAMESPACE:
                self.add_namespace(classified.namespace)
            else:
                body_lines.append(line)
        return body_lines

    def filter_internal_imports(self) -> Set[ImportStatement]:
        """Returns the imports that do not reference a project namespace."""
        return {
            statement for statement in self.imports
            if not is_internal_import(statement.identifier, self.namespaces)
        }

    def sorted_imports(self) -> List[str]:
        """Filtered import texts in ordinal order."""
        return sorted(statement.text for statement in self.filter_internal_imports())
