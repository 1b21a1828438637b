from .clean import clean
from .config import config
from .generate import generate
from .init import init
from .log import log
from .process_resources import process_resources
from .version import version

__all__ = [
    "clean",
    "config",
    "generate",
    "init",
    "log",
    "process_resources",
    "version",
]
