import logging
from dataclasses import dataclass, field
from typing import List

from .assembler import build_output
from .config import GeneratorSettings, settings as default_settings
from .context import SourceContext
from .errors import GenerationError
from .project import ProjectMetadata
from .sources import load_sources, order_source_files
from .writer import save_output

logger = logging.getLogger("singlecs.engine")


@dataclass
class MergeResult:
    lines: List[str]
    warnings: List[str] = field(default_factory=list)
    files_merged: int = 0
    imports_kept: int = 0

    @property
    def text(self) -> str:
        return "".join(line + "\n" for line in self.lines)


class SingleFileGenerator:
    """
    Merges the sources of one project into a single C# file.

    Each call to `merge` works on a fresh SourceContext, so one generator
    can be run repeatedly and always produces the same document for the
    same inputs.
    """

    def __init__(self, metadata: ProjectMetadata, settings: GeneratorSettings = None):
        self.metadata = metadata
        self.settings = settings or default_settings

    def merge(self) -> MergeResult:
        """Loads, filters and assembles the document in memory."""
        context = SourceContext()
        context.add_namespace(self.metadata.root_namespace)

        ordered = order_source_files(self.metadata.source_files, self.settings.ENTRY_POINT_FILE_NAME)
        warnings = load_sources(ordered, context)
        lines = build_output(context, self.metadata, self.settings)

        return MergeResult(
            lines=lines,
            warnings=warnings,
            files_merged=len(context.source_files),
            imports_kept=len(context.filter_internal_imports()),
        )

    def generate(self, output_file: str) -> MergeResult:
        """
        Merges and writes the document to `output_file`.

        Raises:
            GenerationError: If reading, assembling or writing fails.
        """
        try:
            result = self.merge()
            save_output(output_file, result.lines)
        except Exception as e:
            raise GenerationError(str(e), path=output_file) from e

        logger.debug(
            f"Merged {result.files_merged} file(s) with {result.imports_kept} using directive(s) "
            f"into {output_file}"
        )
        return result
