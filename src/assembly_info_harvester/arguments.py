import os
import re
from collections.abc import Sequence
from pathlib import Path

from assembly_info_harvester.errors import InvalidVersionFormatError, MissingRequiredOptionError
from assembly_info_harvester.logging import BASE_LOGGER
from assembly_info_harvester.models import HarvestConfig, Version

logger = BASE_LOGGER.getChild("arguments")

OPTION_MARKER = "/"

ASSEMBLY_VERSION_OPTION = "/av:"
ASSEMBLY_FILE_VERSION_OPTION = "/afv:"
FILES_OPTION = "/f:"

PATTERN_SEPARATOR = ";"

OPTION_TOKEN = re.compile(rf"^{re.escape(OPTION_MARKER)}\w+:")


def is_option(token: str) -> bool:
    """Whether the token looks like `/name:value` rather than a path."""
    return OPTION_TOKEN.match(token) is not None


def get_argument_value(args: Sequence[str], prefix: str) -> str | None:
    """Get the value of the first token that starts with `prefix`, ignoring case.

    Returns:
        The rest of the token with surrounding double quotes removed, or None if no token matches.
    """
    prefix = prefix.lower()

    for token in args:
        if token.lower().startswith(prefix):
            return token[len(prefix) :].strip('"')

    return None


def get_positional_argument(args: Sequence[str]) -> str | None:
    """Get the first token that is not an option."""
    return next((token for token in args if not is_option(token)), None)


def _option_name(option: str) -> str:
    return option.rstrip(":")


def _parse_version(args: Sequence[str], option: str, required: bool) -> Version | None:
    value = get_argument_value(args, option)

    if not value:
        if required:
            raise MissingRequiredOptionError(_option_name(option))
        return None

    try:
        return Version.parse(value)
    except InvalidVersionFormatError as e:
        raise e.for_option(_option_name(option)) from e


def _parse_patterns(args: Sequence[str]) -> tuple[str, ...]:
    value = get_argument_value(args, FILES_OPTION)

    if not value:
        raise MissingRequiredOptionError(_option_name(FILES_OPTION))

    return tuple(value.split(PATTERN_SEPARATOR))


def _parse_directory(args: Sequence[str], cwd: Path) -> Path:
    value = get_positional_argument(args)

    directory = Path(value) if value else cwd

    if not directory.is_absolute():
        directory = cwd / directory

    return Path(os.path.abspath(directory))


def parse_config(args: Sequence[str], cwd: Path | None = None) -> HarvestConfig:
    """Build the harvesting configuration from raw command-line tokens.

    Options are validated in the order `/av:`, `/afv:`, `/f:`, so the first problem reported is the
    same one regardless of how the tokens are arranged.

    Args:
        args: The raw tokens, without the program name.
        cwd: The directory relative paths are resolved against. Defaults to the process working directory.

    Raises:
        MissingRequiredOptionError: If `/av:` or `/f:` is absent or empty.
        InvalidVersionFormatError: If `/av:` or `/afv:` is not a four-part version.
    """
    cwd = cwd or Path.cwd()

    version = _parse_version(args, ASSEMBLY_VERSION_OPTION, required=True)
    file_version = _parse_version(args, ASSEMBLY_FILE_VERSION_OPTION, required=False)
    patterns = _parse_patterns(args)
    root = _parse_directory(args, cwd)

    logger.debug(f"Parsed arguments {list(args)}: version={version}, file_version={file_version}, patterns={patterns}, root={root}")

    return HarvestConfig(version=version, file_version=file_version, patterns=patterns, root=root)
