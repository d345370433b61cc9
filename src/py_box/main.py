"""py-box main entry points."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from . import __version__
from .core import (
    NameGenerator,
    NameGeneratorConfig,
    Options,
    PyBoxError,
    ToolchainError,
    add_libraries,
    build_options,
    copy_project,
    ensure_root,
    init_project,
    init_vscode_project,
    load_config,
    open_in_editor,
    resolve_project_name,
    write_default_config,
)

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(config: dict, verbose: bool = False) -> None:
    """Set up logging configuration."""
    log_config = config.get("logging") or {}
    level_name = "DEBUG" if verbose else str(log_config.get("level", "WARNING"))
    level = getattr(logging, level_name.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_project(options: Options) -> Path:
    """Create (or copy) a sandbox project according to options.

    Returns:
        Path to the project directory
    """
    root = ensure_root(options.root)

    project_name = resolve_project_name(
        root,
        name=options.name,
        copy=options.copy,
        seed=options.seed,
        max_attempts=options.max_attempts,
    )

    if options.copy:
        click.echo(f"Copying project: {options.copy} to {project_name}")
        return copy_project(root, options.copy, project_name)

    click.echo(f"Creating project: {project_name}")
    project_dir = init_project(root, project_name)

    if options.add:
        click.echo(f"Adding libraries: {', '.join(options.add)}")
        add_libraries(project_dir, options.add)

    click.echo(f'Project created at "{project_dir}"')

    if options.vscode:
        init_vscode_project(project_dir)
        click.echo("Opening project in VS Code")
        open_in_editor(project_dir)

    return project_dir


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("name", required=False)
@click.option("-r", "--root", help="Root directory for new project.")
@click.option("-c", "--copy", "copy_from", metavar="NAME", help="Copy an existing project.")
@click.option(
    "-w", "--write-config", is_flag=True, help="Write the default config to the config file."
)
@click.option(
    "-a", "--add", multiple=True, metavar="LIB", help="Add a library to the project (repeatable)."
)
@click.option("--vscode/--no-vscode", default=None, help="Open the project in VS Code.")
@click.option("--seed", type=int, help="Seed for the generated project name.")
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    help="Give up after this many taken random names.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(__version__, prog_name="py-box")
def main(
    name: Optional[str],
    root: Optional[str],
    copy_from: Optional[str],
    write_config: bool,
    add: tuple[str, ...],
    vscode: Optional[bool],
    seed: Optional[int],
    max_attempts: Optional[int],
    verbose: bool,
) -> None:
    """Quickly create a new Python sandbox/playground project."""
    load_dotenv()

    config = load_config()
    setup_logging(config, verbose)

    try:
        if write_config:
            config_path = write_default_config()
            click.echo(f"Config written to {config_path}")
            return

        options = build_options(
            config,
            root=root,
            add=add,
            vscode=vscode,
            name=name,
            copy=copy_from,
            seed=seed,
            max_attempts=max_attempts,
        )
        logger.debug(f"Options: {options.to_dict()}")
        create_project(options)
    except PyBoxError as e:
        click.secho(str(e), fg="red", err=True)
        if isinstance(e, ToolchainError) and e.stderr:
            click.echo(e.stderr, err=True)
        sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option("-s", "--seed", type=int, help="Seed for the random number generator.")
@click.option("-S", "--separator", default=" ", show_default=True, help="Separator between words.")
@click.option("-c", "--capitalize", is_flag=True, help="Capitalize the first letter of each word.")
@click.option("-n", "--add-numbers", is_flag=True, help="Add a random number at the end.")
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True,
              help="Number of names to print.")
def random_name(
    seed: Optional[int],
    separator: str,
    capitalize: bool,
    add_numbers: bool,
    count: int,
) -> None:
    """Print random adjective-animal names."""
    try:
        generator = NameGenerator(
            NameGeneratorConfig(
                seed=seed,
                separator=separator,
                capitalize=capitalize,
                add_numbers=add_numbers,
            )
        )
    except PyBoxError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)

    for _ in range(count):
        click.echo(generator.next())


if __name__ == "__main__":
    main()
