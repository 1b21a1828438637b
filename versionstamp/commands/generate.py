import click
from .. import config as config_module
from .. import generator
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..tasks import resolve_output_dir

@click.command()
@click.option("--version-string", default=None, help="Version to write. Overrides project.version from versionstamp.toml.")
@click.option("--output-dir", default=None, type=click.Path(), help="Directory to write the version resource into.")
@click.option("--force", is_flag=True, help="Regenerate even if the existing file is up to date.")
@click.pass_context
@handle_exceptions
def generate(ctx, version_string, output_dir, force):
    """Generate the version resource file for the project."""
    conf = config_module.load_config(path=ctx.obj["path"])
    version = version_string or config_module.get_project_version(conf)
    if not version:
        raise click.UsageError(
            "No version given. Pass --version-string or set 'version' under [project] in versionstamp.toml."
        )

    if not output_dir:
        output_dir = resolve_output_dir(conf, ctx.obj["path"])

    if not force and generator.is_up_to_date(version, output_dir):
        logger.info(f"Version resource in {output_dir} is up to date ({version}).")
        return

    logger.info(f"Generating version resource for version {version}...")
    generator.generate_version_resource(version, output_dir)
