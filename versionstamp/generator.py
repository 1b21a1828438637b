"""Writes the version resource file consumed at runtime.

The file holds a single line, ``version=<value>``, with no quoting or
escaping. Readers depend on the exact key name, so it must not change.
"""
import contextlib
import os
from .cli_logger import logger

VERSION_FILE_NAME = "ai.sdk-version.properties"
VERSION_KEY = "version"
DEFAULT_OUTPUT_DIR = os.path.join("build", "generated", "resources", "sdk-version")


class VersionResourceError(ValueError):
    """Raised when the version resource cannot be generated from the given input."""


def render_version_resource(version):
    """Return the exact text written for ``version``."""
    return f"{VERSION_KEY}={version}\n"


def version_resource_path(output_dir):
    return os.path.join(output_dir, VERSION_FILE_NAME)


def generate_version_resource(version, output_dir):
    """Write ``version=<version>`` into ``output_dir``/ai.sdk-version.properties.

    The directory and its parents are created when missing. An existing file
    is replaced through a temporary sibling, so readers never observe a
    partially written file. Filesystem errors propagate to the caller.

    Returns the path of the written file.
    """
    if version is None or str(version) == "":
        raise VersionResourceError("A non-empty version string is required to generate the version resource.")
    version = str(version)

    try:
        os.makedirs(output_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"Error creating output directory {output_dir}: {e}")
        raise

    target = version_resource_path(output_dir)
    temp_target = target + ".tmp"
    try:
        with open(temp_target, "w", encoding="utf-8", newline="\n") as f:
            f.write(render_version_resource(version))
        os.replace(temp_target, target)
    except OSError as e:
        logger.error(f"Error writing version resource {target}: {e}")
        with contextlib.suppress(OSError):
            if os.path.exists(temp_target):
                os.remove(temp_target)
        raise

    logger.success(f"Wrote {VERSION_KEY}={version} to {target}")
    return target


def _split_property(line):
    # Key ends at the first '=', ':' or whitespace; one separator is consumed
    for i, ch in enumerate(line):
        if ch in "=:" or ch.isspace():
            break
    else:
        return line, ""
    rest = line[i:].lstrip()
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip()
    return line[:i], rest


def read_version_resource(path):
    """Return the ``version`` value stored in a properties file, or None.

    Follows the Java properties line format without escapes or continuation
    lines: blank lines and ``#``/``!`` comments are skipped, the key may be
    separated by ``=``, ``:`` or whitespace, and only leading whitespace is
    removed from the value.
    """
    if not os.path.isfile(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\r\n").lstrip()
            if not line or line[0] in "#!":
                continue
            key, value = _split_property(line)
            if key == VERSION_KEY:
                return value
    return None


def is_up_to_date(version, output_dir):
    """Check whether the file in ``output_dir`` already matches ``version``."""
    target = version_resource_path(output_dir)
    if not os.path.isfile(target):
        return False
    try:
        with open(target, "r", encoding="utf-8", newline="") as f:
            return f.read() == render_version_resource(version)
    except OSError:
        return False
