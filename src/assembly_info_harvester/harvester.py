import re
from collections.abc import Callable
from functools import cache
from pathlib import Path

from pydantic import BaseModel, Field

from assembly_info_harvester.errors import HarvestDirectoryNotFoundError, HarvestFileError
from assembly_info_harvester.logging import BASE_LOGGER
from assembly_info_harvester.models import HarvestConfig, Version

logger = BASE_LOGGER.getChild("harvester")

ASSEMBLY_VERSION_ATTRIBUTE = "AssemblyVersion"
ASSEMBLY_FILE_VERSION_ATTRIBUTE = "AssemblyFileVersion"

ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class HarvestResult(BaseModel):
    path: Path = Field(description="The file that was rewritten.")
    version_replacements: int = Field(default=0, description="The number of AssemblyVersion values replaced.")
    file_version_replacements: int = Field(default=0, description="The number of AssemblyFileVersion values replaced.")


@cache
def attribute_pattern(attribute: str) -> re.Pattern[str]:
    """The regex for a four-part version inside `[assembly: <attribute>("...")]`.

    Group 1 is everything before the version and group 2 everything after it.
    """
    return re.compile(rf'(\[assembly:\s*{re.escape(attribute)}\(")[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+("\)\])')


def replace_attribute_version(content: str, attribute: str, version: Version | str) -> tuple[str, int]:
    """Replace every version value of the given assembly attribute.

    Returns:
        The new content and the number of values replaced.

    Example:
        >>> replace_attribute_version('[assembly: AssemblyVersion("1.0.0.0")]', "AssemblyVersion", "2.3.4.5")
        ('[assembly: AssemblyVersion("2.3.4.5")]', 1)
    """
    replacement = str(version)

    return attribute_pattern(attribute).subn(lambda match: f"{match.group(1)}{replacement}{match.group(2)}", content)


def find_files(root: Path, pattern: str) -> list[Path]:
    """Finds files under root, at any depth, whose name matches the glob.

    An empty pattern matches nothing.
    """
    if not pattern:
        return []

    return sorted(path for path in root.rglob(pattern) if path.is_file())


def harvest_file(path: Path, version: Version, file_version: Version | None = None) -> HarvestResult:
    """Rewrite the assembly attributes of a single file in place."""

    try:
        with path.open(encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            content = f.read()
    except OSError as e:
        raise HarvestFileError(path, str(e)) from e

    content, version_replacements = replace_attribute_version(content, ASSEMBLY_VERSION_ATTRIBUTE, version)

    file_version_replacements = 0
    if file_version is not None:
        content, file_version_replacements = replace_attribute_version(content, ASSEMBLY_FILE_VERSION_ATTRIBUTE, file_version)

    try:
        with path.open("w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
            f.write(content)
    except OSError as e:
        raise HarvestFileError(path, str(e)) from e

    logger.debug(f"Rewrote {path}: {version_replacements} version(s), {file_version_replacements} file version(s)")

    return HarvestResult(path=path, version_replacements=version_replacements, file_version_replacements=file_version_replacements)


def harvest(config: HarvestConfig, on_file: Callable[[HarvestResult], None] | None = None) -> list[HarvestResult]:
    """Rewrite every file under the configured root that matches one of the patterns.

    Patterns are processed in order and files in sorted order. A file matched by more than one
    pattern is rewritten once per pattern. The first error stops the run.

    Args:
        config: The harvesting configuration.
        on_file: Called with each result as soon as its file has been written.

    Raises:
        HarvestDirectoryNotFoundError: If the root is not an existing directory.
        HarvestFileError: If a matched file cannot be read or written.
    """
    if not config.root.is_dir():
        raise HarvestDirectoryNotFoundError(config.root)

    results: list[HarvestResult] = []

    for pattern in config.patterns:
        files = find_files(config.root, pattern)
        logger.info(f"Found {len(files)} file(s) matching {pattern!r} under {config.root}")

        for path in files:
            result = harvest_file(path, config.version, config.file_version)
            results.append(result)

            if on_file is not None:
                on_file(result)

    return results
