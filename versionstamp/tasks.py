import os
from . import config as config_module
from .cli_logger import logger
from .generator import DEFAULT_OUTPUT_DIR, VersionResourceError, generate_version_resource
from .resources import ResourceSet, UnknownTaskError

GENERATE_TASK = "generateVersionResource"
DEFAULT_DESTINATION = os.path.join("build", "resources", "main")


class TaskRegistry:
    def __init__(self):
        self._tasks = {}

    def register(self, name, func):
        self._tasks[name] = func

    def run(self, name):
        try:
            func = self._tasks[name]
        except KeyError:
            raise UnknownTaskError(f"No task named '{name}' is registered") from None
        return func()

    def __contains__(self, name):
        return name in self._tasks


def _project_dir(project_path, value, default):
    value = value or default
    if os.path.isabs(value):
        return value
    return os.path.join(project_path, value)


def resolve_output_dir(conf, project_path="."):
    resources = config_module.get_resources_section(conf)
    return _project_dir(project_path, resources.get("output_dir"), DEFAULT_OUTPUT_DIR)


def resolve_destination(conf, project_path="."):
    resources = config_module.get_resources_section(conf)
    return _project_dir(project_path, resources.get("destination"), DEFAULT_DESTINATION)


def apply_version_plugin(conf, project_path="."):
    """Wire the version resource task and its output directory for a project.

    Returns the task registry and the resource set. The generated directory is
    registered as a resource root built by ``generateVersionResource``, and so
    is every extra root listed under ``resources.roots``.
    """
    version = config_module.get_project_version(conf)
    output_dir = resolve_output_dir(conf, project_path)

    def generate():
        if version is None:
            raise VersionResourceError(
                f"No project version set. Add 'version' under [project] in {config_module.CONFIG_FILE}."
            )
        return generate_version_resource(version, output_dir)

    tasks = TaskRegistry()
    tasks.register(GENERATE_TASK, generate)

    resource_set = ResourceSet()
    for root in config_module.get_resources_section(conf).get("roots", []):
        resource_set.add(_project_dir(project_path, root, root))
    resource_set.add(output_dir, built_by=GENERATE_TASK)
    logger.debug(f"Registered {len(resource_set)} resource root(s) for {project_path}")
    return tasks, resource_set
