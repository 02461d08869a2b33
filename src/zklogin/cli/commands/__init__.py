"""CLI command modules for zklogin.

Each module exposes a ``register(subparsers)`` function that wires up
its argparse sub-commands and sets ``parser.set_defaults(func=handler)``.
"""

from . import wallet
from .wallet import cmd_forget, cmd_login, cmd_register, cmd_show, cmd_sign

COMMAND_MODULES = [
    wallet,
]

__all__ = [
    "COMMAND_MODULES",
    "cmd_forget",
    "cmd_login",
    "cmd_register",
    "cmd_show",
    "cmd_sign",
]
