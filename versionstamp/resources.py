import os
import shutil
from .cli_logger import logger


class UnknownTaskError(KeyError):
    """Raised when a resource root is built by a task that was never registered."""


class ResourceLayoutError(ValueError):
    """Raised when the resource destination lies inside one of the resource roots."""


class ResourceRoot:
    """A directory whose contents are copied into the build output."""

    def __init__(self, path, built_by=None):
        self.path = os.path.abspath(path)
        self.built_by = built_by

    def __eq__(self, other):
        if not isinstance(other, ResourceRoot):
            return NotImplemented
        return self.path == other.path and self.built_by == other.built_by

    def __repr__(self):
        return f"ResourceRoot({self.path!r}, built_by={self.built_by!r})"


class ResourceSet:
    def __init__(self):
        self._roots = []

    def add(self, path, built_by=None):
        """Register ``path`` as a resource root; registering a path twice is a no-op."""
        root = ResourceRoot(path, built_by)
        for existing in self._roots:
            if existing.path == root.path:
                if built_by and not existing.built_by:
                    existing.built_by = built_by
                return existing
        self._roots.append(root)
        return root

    @property
    def roots(self):
        return list(self._roots)

    def __len__(self):
        return len(self._roots)


def _copy_root(root, destination):
    for entry in os.listdir(root.path):
        source = os.path.join(root.path, entry)
        target = os.path.join(destination, entry)
        if os.path.isdir(source):
            shutil.copytree(source, target, dirs_exist_ok=True)
        else:
            shutil.copy2(source, target)
        logger.step_info(f"copied: {os.path.relpath(source, root.path)}", indent=2)


def process_resources(resource_set, destination, tasks):
    """Copy every resource root into ``destination``.

    Roots declared as built by a task get that task run first, once per call.
    A root that contains ``destination`` is rejected before any task runs.
    """
    destination = os.path.abspath(destination)
    for root in resource_set.roots:
        if destination == root.path or destination.startswith(root.path + os.sep):
            raise ResourceLayoutError(
                f"Resource destination {destination} is inside resource root {root.path}"
            )

    tasks_run = set()
    for root in resource_set.roots:
        if root.built_by and root.built_by not in tasks_run:
            if root.built_by not in tasks:
                raise UnknownTaskError(f"Resource root {root.path} is built by unknown task '{root.built_by}'")
            logger.info(f"Running task '{root.built_by}' for resource root {root.path}")
            tasks.run(root.built_by)
            tasks_run.add(root.built_by)

    os.makedirs(destination, exist_ok=True)
    copied = 0
    for root in resource_set.roots:
        if not os.path.isdir(root.path):
            logger.warning(f"Resource root {root.path} does not exist. Skipping.")
            continue
        logger.info(f"Copying resources from {root.path} to {destination}")
        try:
            _copy_root(root, destination)
        except (shutil.Error, OSError) as e:
            logger.error(f"Error copying resources from {root.path} to {destination}: {e}")
            logger.info("Please check directory permissions and ensure enough disk space is available.")
            raise
        copied += 1
    return copied
