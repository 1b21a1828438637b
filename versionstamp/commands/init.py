import click
import os
import sys
from .. import config as config_module
from ..cli_logger import logger
from ..generator import DEFAULT_OUTPUT_DIR
from ..tasks import DEFAULT_DESTINATION


def _get_default_config(name="my-project", version="0.1.0"):
    return {
        "project": {
            "name": name,
            "version": version,
        },
        "resources": {
            "output_dir": DEFAULT_OUTPUT_DIR,
            "roots": [],
            "destination": DEFAULT_DESTINATION,
        },
    }


@click.command()
@click.option('--non-interactive', is_flag=True, help='Run in non-interactive mode using default values.')
@click.option('--version-string', default=None, help='Initial project version.')
@click.pass_context
def init(ctx, non_interactive, version_string):
    """Initialize a new versionstamp project configuration."""
    logger.info("Initializing a new versionstamp project.")

    if non_interactive:
        logger.info("Running in non-interactive mode with default values.")
        conf = _get_default_config(version=version_string or "0.1.0")
    else:
        logger.info("Please provide the following details:")
        try:
            name = click.prompt("Project Name", default=os.path.basename(os.path.abspath(ctx.obj["path"])))
            version = click.prompt("Project Version", default=version_string or "0.1.0")
            conf = _get_default_config(name=name, version=version)
        except click.Abort:
            logger.warning("\nProject initialization aborted by user.")
            return

    if not config_module.save_config(conf, path=ctx.obj["path"]):
        sys.exit(1)
    logger.success(f"Project initialized successfully! Configuration saved to {os.path.join(ctx.obj['path'], config_module.CONFIG_FILE)}")
    logger.info("Next steps: Run 'versionstamp generate' to write the version resource.")
