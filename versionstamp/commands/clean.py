import click
import shutil
import os
import sys
from .. import config as config_module
from ..cli_logger import logger
from ..tasks import resolve_destination, resolve_output_dir

@click.command()
@click.pass_context
def clean(ctx):
    """Remove the generated version resource and processed resources."""
    logger.info("Cleaning generated resources...")
    conf = config_module.load_config(path=ctx.obj["path"])

    items_removed = 0
    for path in (resolve_output_dir(conf, ctx.obj["path"]), resolve_destination(conf, ctx.obj["path"])):
        if not os.path.isdir(path):
            continue
        logger.info(f"Attempting to remove directory {path}...")
        try:
            shutil.rmtree(path)
            logger.success(f"Removed directory {path}")
            items_removed += 1
        except OSError as e:
            logger.error(f"Error removing directory {path}: {e}")
            logger.info("Please check file permissions and ensure the directory is not in use.")
            sys.exit(1)

    if items_removed > 0:
        logger.success(f"Cleaning complete. Removed {items_removed} items.")
    else:
        logger.info("Project is already clean.")
