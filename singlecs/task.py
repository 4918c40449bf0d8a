"""
Build-host entry point.

A build system configures a GenerateSingleFileTask with the project's
properties and calls `execute()`, which reports through logging and
returns success as a bool instead of raising.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GeneratorSettings
from .engine import SingleFileGenerator
from .project import DependencyEntry, ProjectMetadata
from .sources import SourceItem

logger = logging.getLogger("singlecs.task")


@dataclass
class GenerateSingleFileTask:
    output_file: str
    source_files: List[SourceItem] = field(default_factory=list)
    project_name: str = ""
    project_sdk: Optional[str] = None
    package_references: List[DependencyEntry] = field(default_factory=list)
    root_namespace: str = ""
    settings: Optional[GeneratorSettings] = None
    error: Optional[Exception] = field(default=None, init=False)

    @classmethod
    def from_project(cls, metadata: ProjectMetadata, output_file: str, settings: GeneratorSettings = None):
        return cls(
            output_file=output_file,
            source_files=list(metadata.source_files),
            project_name=metadata.project_name,
            project_sdk=metadata.sdk,
            package_references=list(metadata.dependencies),
            root_namespace=metadata.root_namespace,
            settings=settings,
        )

    def to_metadata(self) -> ProjectMetadata:
        return ProjectMetadata(
            project_name=self.project_name,
            sdk=self.project_sdk,
            root_namespace=self.root_namespace,
            dependencies=list(self.package_references),
            source_files=list(self.source_files),
        )

    def execute(self) -> bool:
        self.error = None
        try:
            generator = SingleFileGenerator(self.to_metadata(), self.settings)
            generator.generate(self.output_file)
        except Exception as e:
            self.error = e
            logger.exception(f"Failed to create merged C# file {self.output_file}: {e}")
            return False

        logger.info(f"Created merged C# file: {self.output_file}")
        return True
