import click


@click.group()
@click.version_option(package_name="simpleswap")
def cli() -> None: ...


from . import config, quote  # noqa: F401, E402
