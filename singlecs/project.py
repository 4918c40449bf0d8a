import fnmatch
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from .config import GeneratorSettings, settings as default_settings
from .errors import InvalidProjectExtensionError, InvalidProjectFormatError, ProjectNotFoundError
from .sources import SourceItem


@dataclass
class DependencyEntry:
    name: str
    version: Optional[str] = None

    @property
    def directive(self) -> str:
        if self.version:
            return f"#:package {self.name}@{self.version}"
        return f"#:package {self.name}"


@dataclass
class ProjectMetadata:
    project_name: str = ""
    # None means the default SDK of whichever settings the merge runs with.
    sdk: Optional[str] = None
    root_namespace: str = ""
    dependencies: List[DependencyEntry] = field(default_factory=list)
    source_files: List[SourceItem] = field(default_factory=list)
    path: str = ""


def _local_name(tag) -> str:
    # Strips "{namespace}" from qualified element names.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _elements(root: ET.Element, name: str) -> List[ET.Element]:
    return [element for element in root.iter() if _local_name(element.tag) == name]


def validate_project_path(path: str, settings: GeneratorSettings = None) -> str:
    """Returns the absolute descriptor path or raises a ProjectFileError."""
    settings = settings or default_settings
    full_path = os.path.abspath(path)

    if os.path.splitext(full_path)[1] != settings.PROJECT_FILE_EXTENSION:
        raise InvalidProjectExtensionError(
            f"File must be a {settings.PROJECT_FILE_EXTENSION} file: {full_path}", path=full_path
        )
    if not os.path.isfile(full_path):
        raise ProjectNotFoundError(f"Project file not found: {full_path}", path=full_path)
    return full_path


def find_source_files(project_dir: str, settings: GeneratorSettings = None) -> List[SourceItem]:
    """All source files under `project_dir`, outside build output directories, in ordinal path order."""
    settings = settings or default_settings
    paths = []
    for root, dirs, files in os.walk(project_dir):
        for excluded in settings.EXCLUDED_DIRECTORIES:
            if excluded in dirs:
                dirs.remove(excluded)
        for file in files:
            if fnmatch.fnmatch(file, settings.SOURCE_FILE_PATTERN):
                paths.append(os.path.join(root, file))
    return [SourceItem(p) for p in sorted(paths)]


def load_project(path: str, settings: GeneratorSettings = None) -> ProjectMetadata:
    settings = settings or default_settings
    full_path = validate_project_path(path, settings)

    try:
        root = ET.parse(full_path).getroot()
    except (ET.ParseError, LookupError, ValueError) as e:
        # LookupError and ValueError come from unknown or unsupported declared encodings.
        raise InvalidProjectFormatError(f"Invalid project file format: {e}", path=full_path) from e
    except OSError as e:
        raise InvalidProjectFormatError(f"Cannot read project file: {e}", path=full_path) from e

    root_namespaces = _elements(root, "RootNamespace")
    root_namespace = (root_namespaces[0].text or "").strip() if root_namespaces else ""

    dependencies = []
    for reference in _elements(root, "PackageReference"):
        version = reference.get("Version")
        if version is None:
            # <PackageReference Include="X"><Version>1.0</Version></PackageReference>
            nested = [child for child in reference if _local_name(child.tag) == "Version"]
            if nested:
                version = (nested[0].text or "").strip()
        dependencies.append(DependencyEntry(name=reference.get("Include", ""), version=version or None))

    return ProjectMetadata(
        project_name=os.path.splitext(os.path.basename(full_path))[0],
        sdk=root.get("Sdk", ""),
        root_namespace=root_namespace,
        dependencies=dependencies,
        source_files=find_source_files(os.path.dirname(full_path), settings),
        path=full_path,
    )
