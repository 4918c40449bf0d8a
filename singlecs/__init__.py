from .classifier import ImportStatement, LineKind, classify_line
from .context import SourceContext, is_internal_import
from .engine import MergeResult, SingleFileGenerator
from .project import DependencyEntry, ProjectMetadata, load_project
from .sources import SourceItem
from .task import GenerateSingleFileTask

__all__ = [
    "ImportStatement",
    "LineKind",
    "classify_line",
    "SourceContext",
    "is_internal_import",
    "MergeResult",
    "SingleFileGenerator",
    "DependencyEntry",
    "ProjectMetadata",
    "load_project",
    "SourceItem",
    "GenerateSingleFileTask",
]
