import asyncclick as click

from assembly_info_harvester.harvester import HarvestResult
from assembly_info_harvester.models import HarvestConfig

PROGRAM_NAME = "assembly-info-harvester"

LABEL_WIDTH = 25
FLAG_INDENT = 3
FLAG_WIDTH = 20

HELP_ENTRIES: list[tuple[str, str, list[str]]] = [
    ('/av:"<version>"', "Required", ["A version to set for AssemblyVersion attribute"]),
    ('/afv:"<version>"', "Optional", ["A version to set for AssemblyFileVersion attribute"]),
    (
        '/f:"<file(s)>"',
        "Required",
        ["Names of file to look for attributes in", "Separate multiple file names with semi-colon (;)"],
    ),
    (
        "<directory>",
        "Optional",
        ["A path to start harvesting from", "If not specified harvesting will start from current directory"],
    ),
]


def _help_line(flag: str, text: str) -> str:
    return f"{'':<{FLAG_INDENT}}{flag:<{FLAG_WIDTH}}{text}"


def _summary_line(label: str, value: object) -> str:
    return f"{label:<{LABEL_WIDTH}}{value}"


def logo_text() -> str:
    return "\n".join(
        [
            "AssemblyInfo Harvester",
            "A tool to change AssemblyVersion and AssemblyFileVersion attribute values",
            "",
        ]
    )


def help_text() -> str:
    lines = ["Usage:", f"{PROGRAM_NAME} <options> [<directory>]", "", "options:"]

    for index, (flag, requirement, descriptions) in enumerate(HELP_ENTRIES):
        if index:
            lines.append("")
        lines.append(_help_line(flag, requirement))
        lines.extend(_help_line("", description) for description in descriptions)

    return "\n".join(lines)


def summary_text(config: HarvestConfig) -> str:
    """The effective configuration, one labelled line per setting."""
    file_version = "<null>" if config.file_version is None else str(config.file_version)
    patterns = "".join(f"[{pattern}] " for pattern in config.patterns).rstrip()

    return "\n".join(
        [
            _summary_line("AssemblyVersion:", config.version),
            _summary_line("AssemblyFileVersion:", file_version),
            _summary_line("Files:", patterns),
            _summary_line("Directory:", config.root),
            "",
        ]
    )


def print_logo() -> None:
    click.echo(logo_text())


def print_help() -> None:
    click.echo(help_text())


def print_summary(config: HarvestConfig) -> None:
    click.echo(summary_text(config))


def print_result(result: HarvestResult) -> None:
    click.echo(str(result.path))


def print_error(message: str) -> None:
    click.echo(message)
