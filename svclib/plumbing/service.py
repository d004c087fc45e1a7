"""
Lifecycle actions through the generic `service` front end, which works with whichever init system
is installed.

Command templates return `None` where the service can't perform an action natively, in which case
the caller is expected to fall back to other means (e.g. stop and start in place of restart).
"""

import logging
import os
import re
from typing import List, Optional

from .common import command, Result, Service, State
from . import commands


LOG = logging.getLogger(__name__)


def _args(service: Service, action: str) -> List[str]:
    return [commands.path("service"), service, action]


def start_args(service: Service) -> List[str]:
    return _args(service, "start")


def stop_args(service: Service) -> List[str]:
    return _args(service, "stop")


def restart_args(service: Service, has_restart: bool = False) -> Optional[List[str]]:
    """
    Command to restart the service, if it declares support for restarting.
    """
    return _args(service, "restart") if has_restart else None


def status_args(service: Service, has_status: bool = False) -> Optional[List[str]]:
    """
    Command to query if the service is running, if it declares support for status checks.
    """
    return _args(service, "status") if has_status else None


def run(args: List[str]) -> Result[None]:
    """
    Run a lifecycle command, failing on a non-zero exit status.
    """
    command(args)
    LOG.debug("Ran service action: %r", args[1:])
    return Result(State.success)


def start(service: Service) -> Result[None]:
    """
    Start a service.
    """
    return run(start_args(service))


def stop(service: Service) -> Result[None]:
    """
    Stop a service.
    """
    return run(stop_args(service))


def get_status(service: Service, has_status: bool = False) -> Optional[int]:
    """
    Run the service's own status check and return its exit status, or `None` if not supported.
    """
    args = status_args(service, has_status)
    if not args:
        return None
    return command(args, output=True, check=False).returncode


def get_pid(pattern: str) -> Optional[int]:
    """
    Search the process table for a command line matching the pattern, and return its process ID.
    """
    proc = command([commands.path("ps"), "-eo", "pid=,args="], output=True)
    regex = re.compile(pattern)
    # The calling script may carry the pattern in its own arguments.
    own = {str(os.getpid()), str(os.getppid())}
    for line in proc.stdout.decode("utf-8").splitlines():
        pid, _, args = line.strip().partition(" ")
        if pid in own:
            continue
        if pid.isdigit() and regex.search(args):
            LOG.debug("Found process %s matching %r: %r", pid, pattern, args)
            return int(pid)
    return None
