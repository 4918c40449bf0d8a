"""
Assembly of the merged single-file document.

Layout:
    #:sdk <name>                        (only for a non-default SDK)
    #:property PublishTrimmed=false
    #:package <name>[@<version>]        (one per dependency)
    // Auto-generated single-file application for project <name>.
    using ...;                          (filtered, ordinal order)
    // <path>                           (per file, followed by its body)

Blocks are separated by one blank line.
"""

from typing import Iterable, List, Optional

from .config import GeneratorSettings, settings as default_settings
from .context import ParsedFile, SourceContext
from .project import DependencyEntry, ProjectMetadata

PUBLISH_TRIMMED_PROPERTY = "#:property PublishTrimmed=false"
GENERATED_HEADER = "// Auto-generated single-file application for project {name}."


def add_sdk_directive(output: List[str], sdk: Optional[str], default_sdk: str):
    if sdk and sdk.strip() and sdk != default_sdk:
        output.append(f"#:sdk {sdk}")
        output.append("")


def add_properties(output: List[str]):
    # Always disabled, whatever the project sets.
    output.append(PUBLISH_TRIMMED_PROPERTY)
    output.append("")


def add_package_directives(output: List[str], dependencies: Iterable[DependencyEntry], tool_package: str):
    added = False
    for dependency in dependencies:
        if dependency.name.lower() == tool_package.lower():
            continue
        output.append(dependency.directive)
        added = True
    if added:
        output.append("")


def add_generated_info(output: List[str], project_name: str):
    output.append(GENERATED_HEADER.format(name=project_name))
    output.append("")


def add_imports(output: List[str], imports: Iterable[str]):
    output.extend(sorted(imports))
    output.append("")


def add_source_code(output: List[str], files: Iterable[ParsedFile]):
    for parsed in files:
        output.append(f"// {parsed.path}")
        output.append("")
        output.extend(parsed.body_lines)
        output.append("")


def build_output(
    context: SourceContext,
    metadata: ProjectMetadata,
    settings: GeneratorSettings = None,
) -> List[str]:
    """Builds the merged document lines. Neither argument is modified."""
    settings = settings or default_settings
    output: List[str] = []
    add_sdk_directive(output, metadata.sdk, settings.DEFAULT_SDK)
    add_properties(output)
    add_package_directives(output, metadata.dependencies, settings.TOOL_PACKAGE_NAME)
    add_generated_info(output, metadata.project_name)
    add_imports(output, context.sorted_imports())
    add_source_code(output, context.source_files)
    return output
