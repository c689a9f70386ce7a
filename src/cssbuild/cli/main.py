"""cssbuild CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuild import __version__
from cssbuild.config import CssbuildConfig


@click.group()
@click.version_option(version=__version__, prog_name="cssbuild")
@click.option("--verbose", "-v", is_flag=True, help="Log selector building at DEBUG level")
def cli(verbose: bool) -> None:
    """cssbuild - assemble CSS selectors from their parts."""
    config = CssbuildConfig(log_level="DEBUG" if verbose else "WARNING")
    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("cssbuild").setLevel(config.log_level)


# Import and register subcommands
from cssbuild.cli.build import build, combine  # noqa: E402
from cssbuild.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rectangle)
