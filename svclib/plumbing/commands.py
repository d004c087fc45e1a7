"""
Locations of the external commands used to manage services.

Each command has a conventional path, which can be overridden in the environment with a variable
named after the command, e.g. `SVCLIB_UPDATE_RC_D=/sbin/update-rc.d`.
"""

import logging
import os
import re
from typing import NamedTuple, Set, Tuple

from .common import CommandUnavailable


LOG = logging.getLogger(__name__)


class Command(NamedTuple):
    """
    Declaration of an external command, and whether the library can operate without it.
    """

    name: str
    path: str
    required: bool = True


COMMANDS: Tuple[Command, ...] = (
    Command("systemctl", "/bin/systemctl", required=False),
    Command("update-rc.d", "/usr/sbin/update-rc.d"),
    Command("invoke-rc.d", "/usr/sbin/invoke-rc.d"),
    Command("service", "/usr/sbin/service"),
    Command("ps", "/bin/ps", required=False),
)


def env_var(name: str) -> str:
    """
    Name of the environment variable overriding the path of a command.
    """
    return "SVCLIB_{}".format(re.sub(r"[^A-Z0-9]", "_", name.upper()))


def path(name: str) -> str:
    """
    Look up the configured path of a declared command.
    """
    for cmd in COMMANDS:
        if cmd.name == name:
            return os.getenv(env_var(name)) or cmd.path
    raise KeyError(name)


def check() -> Set[str]:
    """
    Test that all declared commands are executable, and return the names of those available.

    A missing required command raises `CommandUnavailable`.
    """
    available = set()
    for cmd in COMMANDS:
        location = path(cmd.name)
        if os.access(location, os.X_OK):
            available.add(cmd.name)
        elif cmd.required:
            raise CommandUnavailable(2, "Required command {!r} not available".format(cmd.name),
                                     location)
        else:
            LOG.debug("Optional command %r not available at %r", cmd.name, location)
    return available
