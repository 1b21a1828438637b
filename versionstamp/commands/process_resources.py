import click
from .. import config as config_module
from ..cli_logger import logger
from ..decorators import handle_exceptions
from ..resources import process_resources as copy_resources
from ..tasks import apply_version_plugin, resolve_destination

@click.command(name="process-resources")
@click.pass_context
@handle_exceptions
def process_resources(ctx):
    """Generate the version resource and copy all resource roots into the build output."""
    project_path = ctx.obj["path"]
    conf = config_module.load_config(path=project_path)
    if not conf:
        raise click.ClickException("No versionstamp.toml found. Please run 'versionstamp init' first.")

    tasks, resource_set = apply_version_plugin(conf, project_path)
    destination = resolve_destination(conf, project_path)
    copied = copy_resources(resource_set, destination, tasks)
    logger.success(f"Processed {copied} resource root(s) into {destination}")
