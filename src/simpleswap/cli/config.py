from pathlib import Path
from typing import Literal

import click
import tomlkit
from pydantic import TypeAdapter

from simpleswap.cli import cli
from simpleswap.config import CONFIG_FILE, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: Literal["json", "toml"]) -> None:
    """
    Display the current configuration in JSON or TOML (default) format.
    """

    match output_format:
        case "json":
            click.echo(
                TypeAdapter(dict).dump_json(
                    settings.model_dump(),
                    indent=2,
                ),
            )
        case "toml":
            click.echo(
                tomlkit.dumps(
                    settings.model_dump(),
                ),
            )


@config.command("init")
@click.option(
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=CONFIG_FILE,
    show_default=True,
    help="Location of the configuration file",
)
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config_init(config_path: Path, force: bool) -> None:  # noqa: FBT001
    """
    Write the current configuration to a TOML file.
    """

    if config_path.exists() and not force:
        raise click.ClickException(f"{config_path} exists, use --force to overwrite it.")

    save_config_to_file(settings, config_path=config_path)
    click.echo(f"Configuration written to {config_path}")
