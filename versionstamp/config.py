import toml
import os
from .cli_logger import logger

CONFIG_FILE = "versionstamp.toml"

# Build tools report this placeholder when no version has been set
UNSPECIFIED_VERSION = "unspecified"

VERSION_KEY_PATH = "project.version"
# Keys under [resources] that hold a list of paths rather than a single path
LIST_KEY_PATHS = {"resources.roots"}


def config_path(path="."):
    return os.path.join(path, CONFIG_FILE)


def load_config(path="."):
    """Read versionstamp.toml from ``path``; a missing or unreadable file yields {}."""
    target = config_path(path)
    if not os.path.exists(target):
        logger.debug(f"No {CONFIG_FILE} at {target}")
        return {}
    logger.info(f"Loading project metadata from {target}")
    try:
        with open(target, "r") as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        logger.error(f"{target} is not valid TOML: {e}")
    except IOError as e:
        logger.error(f"Cannot read {target}: {e}")
    return {}


def save_config(config, path="."):
    target = config_path(path)
    try:
        with open(target, "w") as f:
            toml.dump(config, f)
    except IOError as e:
        logger.error(f"Cannot write {target}: {e}")
        return False
    logger.info(f"Saved project metadata to {target}")
    return True


def is_usable_version(value):
    """True for any non-empty version other than the build-tool placeholder."""
    return value is not None and str(value) not in ("", UNSPECIFIED_VERSION)


def get_project_version(conf):
    """Return ``project.version`` as a string, or None when it is not set."""
    version = conf.get("project", {}).get("version")
    if not is_usable_version(version):
        return None
    return str(version)


def get_resources_section(conf):
    resources = conf.get("resources")
    return resources if isinstance(resources, dict) else {}
