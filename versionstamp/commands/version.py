import click
import importlib.metadata
from ..cli_logger import logger

@click.command()
def version():
    """Print the version of the versionstamp tool."""
    try:
        ver = importlib.metadata.version("versionstamp")
        logger.info(f"versionstamp version {ver}")
    except importlib.metadata.PackageNotFoundError:
        logger.error("Error: Could not determine the version of versionstamp. Is it installed correctly?")
