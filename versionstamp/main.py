import click
from .commands import *


@click.group()
@click.option("--path", "-p", default=".", help="Path to the project directory.")
@click.pass_context
def cli(ctx, path):
    """versionstamp CLI tool."""
    ctx.obj = {"path": path}

cli.add_command(init)
cli.add_command(generate)
cli.add_command(process_resources)
cli.add_command(clean)
cli.add_command(config)
cli.add_command(version)
cli.add_command(log)

if __name__ == '__main__':
    cli()
