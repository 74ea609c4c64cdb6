import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

import asyncclick as click

from assembly_info_harvester.arguments import parse_config
from assembly_info_harvester.console import print_error, print_help, print_logo, print_result, print_summary
from assembly_info_harvester.errors import HarvesterError
from assembly_info_harvester.harvester import harvest
from assembly_info_harvester.logging import BASE_LOGGER, DEFAULT_LOG_LEVEL, set_log_level

logger = BASE_LOGGER.getChild("main")

LOG_LEVEL_HELP = "The level of diagnostic logging written to stderr. Defaults to WARNING."
WAIT_HELP = "Wait for a keypress before exiting. Useful when launched from a file manager or IDE."


def harvest_command(args: Sequence[str], cwd: Path | None = None) -> int:
    """Run one harvest from raw command-line tokens.

    Returns:
        The process exit code: 0 on success or when only help was requested, 1 on any error.
    """
    print_logo()

    if not args:
        print_help()
        return 0

    try:
        config = parse_config(args, cwd=cwd)
    except HarvesterError as e:
        print_error(str(e))
        return 1

    print_summary(config)

    try:
        results = harvest(config, on_file=print_result)
    except HarvesterError as e:
        logger.debug("Harvest failed", exc_info=True)
        print_error(str(e))
        return 1

    logger.info(f"Updated {len(results)} file(s)")

    return 0


@click.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=DEFAULT_LOG_LEVEL,
    help=LOG_LEVEL_HELP,
)
@click.option("--wait/--no-wait", default=False, help=WAIT_HELP)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
async def cli(args: tuple[str, ...], log_level: str, wait: bool):
    """Set AssemblyVersion and AssemblyFileVersion attribute values in files under a directory.

    \b
    ARGS: /av:"<version>" [/afv:"<version>"] /f:"<pattern>[;<pattern>...]" [<directory>]
    """
    set_log_level(log_level.upper())

    exit_code = harvest_command(args)

    if wait:
        click.pause(info="Press any key to exit...")

    sys.exit(exit_code)


def run_cli():
    asyncio.run(cli())


if __name__ == "__main__":
    run_cli()
