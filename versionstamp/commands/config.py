import click
import json
from .. import config as config_module
from ..cli_logger import logger


def _require_config(ctx):
    """Load versionstamp.toml or stop the command with exit status 1."""
    conf = config_module.load_config(path=ctx.obj["path"])
    if not conf:
        logger.error(f"Error: No {config_module.CONFIG_FILE} found. Please run 'versionstamp init' first.")
        ctx.exit(1)
    return conf


def _lookup(conf, key):
    value = conf
    for k in key.split('.'):
        if not isinstance(value, dict) or k not in value:
            raise KeyError(key)
        value = value[k]
    return value


def _parse_value(key, value):
    if key == config_module.VERSION_KEY_PATH and not config_module.is_usable_version(value):
        raise click.BadParameter(
            f"'{value}' is not a usable project version.", param_hint="VALUE"
        )
    if key in config_module.LIST_KEY_PATHS:
        return [v.strip() for v in value.split(',') if v.strip()]
    return value


def _save(ctx, conf):
    if not config_module.save_config(conf, path=ctx.obj["path"]):
        ctx.exit(1)


@click.group()
@click.pass_context
def config(ctx):
    """View or edit the project metadata in versionstamp.toml."""
    pass


@config.command()
@click.pass_context
def view(ctx):
    """Print versionstamp.toml as stored on disk."""
    _require_config(ctx)
    with open(config_module.config_path(ctx.obj["path"]), "r") as f:
        click.echo(f.read().rstrip())


@config.command(name="list")
@click.pass_context
def list_config(ctx):
    """List all configuration keys and values as JSON."""
    click.echo(json.dumps(_require_config(ctx), indent=4))


@config.command()
@click.argument('key')
@click.pass_context
def get(ctx, key):
    """Get a value by dotted key, e.g. project.version."""
    conf = _require_config(ctx)
    try:
        click.echo(_lookup(conf, key))
    except KeyError:
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        ctx.exit(1)


@config.command(name="set")
@click.argument('key')
@click.argument('value')
@click.pass_context
def set_value(ctx, key, value):
    """Set a value by dotted key.

    project.version must be a real version; resources.roots takes a
    comma-separated list.
    """
    conf = _require_config(ctx)
    parsed = _parse_value(key, value)

    keys = key.split('.')
    section = conf
    for k in keys[:-1]:
        section = section.setdefault(k, {})
    section[keys[-1]] = parsed

    _save(ctx, conf)
    logger.info(f"Set '{key}' to {parsed!r}")


@config.command()
@click.argument('key')
@click.pass_context
def unset(ctx, key):
    """Remove a key by dotted path."""
    conf = _require_config(ctx)
    *parents, last = key.split('.')
    try:
        section = _lookup(conf, '.'.join(parents)) if parents else conf
        del section[last]
    except (KeyError, TypeError):
        logger.error(f"Error: Key '{key}' not found in {config_module.CONFIG_FILE}")
        ctx.exit(1)

    _save(ctx, conf)
    logger.info(f"Unset '{key}'")
    if key == config_module.VERSION_KEY_PATH:
        logger.warning("No project version is set; 'versionstamp generate' now needs --version-string.")
