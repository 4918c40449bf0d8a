"""
Line classification for C# sources.

Each source line is one of:
    IMPORT     `using X.Y;` or `global using X.Y;`
    NAMESPACE  file-scoped `namespace X.Y;`
    BODY       anything else

Only whole-line, single-statement forms are recognized. Block-scoped
`namespace X { ... }`, aliases (`using A = B;`) and `using static` stay in
the body.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

USING_DECLARATION = re.compile(r"^\s*(?P<global>global\s+)?using\s+(?P<using>[\w.]+)\s*;\s*$")
NAMESPACE_DECLARATION = re.compile(r"^\s*namespace\s+(?P<namespace>[\w.]+)\s*;\s*$")


class LineKind(Enum):
    IMPORT = "import"
    NAMESPACE = "namespace"
    BODY = "body"


@dataclass(frozen=True)
class ImportStatement:
    identifier: str
    is_global: bool = False

    @property
    def text(self) -> str:
        # Normalized so spacing differences do not produce duplicates.
        prefix = "global " if self.is_global else ""
        return f"{prefix}using {self.identifier};"


@dataclass(frozen=True)
class ClassifiedLine:
    kind: LineKind
    line: str
    statement: Optional[ImportStatement] = None
    namespace: Optional[str] = None


def classify_line(line: str) -> ClassifiedLine:
    """Classifies a single raw source line."""
    match = USING_DECLARATION.match(line)
    if match:
        statement = ImportStatement(match.group("using"), is_global=bool(match.group("global")))
        return ClassifiedLine(LineKind.IMPORT, line, statement=statement)

    match = NAMESPACE_DECLARATION.match(line)
    if match:
        return ClassifiedLine(LineKind.NAMESPACE, line, namespace=match.group("namespace"))

    return ClassifiedLine(LineKind.BODY, line)
