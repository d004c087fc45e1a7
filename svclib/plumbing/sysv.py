"""
Service management through Debian's init script tools, `update-rc.d` and `invoke-rc.d`.
"""

from enum import IntEnum
from glob import escape, glob
import logging
import os
import os.path
from typing import FrozenSet, Iterable, Iterator

from .common import command, Result, Service, State
from . import commands, paths


LOG = logging.getLogger(__name__)

EXCLUDES: FrozenSet[str] = frozenset((
    # Shared function libraries and shutdown helpers, not services in their own right.
    "functions", "functions.sh", "halt", "killall", "single", "linuxconf", "reboot", "reboot.sh",
    "shutdown.sh", "boot", "rcS", "module-init-tools", "README", "skeleton",
    # Upstart waiters and instance jobs, which need parameters to run.
    "wait-for-state", "portmap-wait", "plymouth-ready", "idmapd-mounting", "startpar-bridge",
    "cryptdisks-udev", "statd-mounting", "gssd-mounting",
    # Yocto boot scripts, unsafe to run outside of boot.
    "banner.sh", "bootmisc.sh", "checkroot.sh", "devpts.sh", "dmesg.sh", "hostname.sh",
    "mountall.sh", "mountnfs.sh", "populate-volatile.sh", "rmnologin.sh", "save-rtc.sh",
    "sendsigs", "sysfs.sh", "umountfs", "umountnfs.sh",
))
"""
Init script directory entries that aren't manageable services.
"""

START_LINK_THRESHOLD = 4
"""
Minimum number of run levels a script must start in to be considered enabled.  Debian's default
multi-user run levels are 2 to 5.
"""


class QueryStatus(IntEnum):
    """
    Exit statuses of `invoke-rc.d --query` that say something about a service's boot policy.

    See invoke-rc.d(8).
    """

    enabled = 104
    """
    The action would be run, the service is enabled.
    """
    unknown = 105
    """
    Behaviour is uncertain, usually because the script doesn't support being queried.
    """
    fallback = 106
    """
    The action is forbidden, but the policy layer supplied a fallback action that would run.
    """


def _is_script(path: str) -> bool:
    if os.path.isdir(path) or not os.access(path, os.X_OK):
        return False
    # Upstart jobs are presented as symlinks to a shared compatibility wrapper.
    return not (os.path.islink(path)
                and os.path.realpath(path) == os.path.realpath(paths.UPSTART_JOB))


def list_scripts(search_path: Iterable[str] = paths.SEARCH_PATH) -> Iterator[Service]:
    """
    Find all init scripts in the given directories.
    """
    for directory in search_path:
        try:
            names = sorted(os.listdir(directory))
        except FileNotFoundError:
            LOG.debug("Service path %r does not exist", directory)
            continue
        for name in names:
            if name.startswith(".") or name in EXCLUDES:
                continue
            if _is_script(os.path.join(directory, name)):
                yield Service(name)


def query_start(service: Service) -> int:
    """
    Ask `invoke-rc.d` whether starting the service is allowed by policy, returning the exit status.

    The command's output is discarded, as scripts aren't consistent in what they print.
    """
    proc = command([commands.path("invoke-rc.d"), "--quiet", "--query", service, "start"],
                   output=True, check=False)
    return proc.returncode


def get_start_link_count(service: Service) -> int:
    """
    Count the run levels with a start symlink for the service.
    """
    return len(glob(os.path.join(paths.RC_D, "S??{}".format(escape(service)))))


def is_enabled(service: Service) -> bool:
    """
    Determine if an init script will run at boot.

    Scripts that can't answer the query are checked against Debian policy: a service that starts
    in each of the default multi-user run levels is enabled.
    """
    status = query_start(service)
    if status in (QueryStatus.enabled, QueryStatus.fallback):
        return True
    elif status == QueryStatus.unknown:
        count = get_start_link_count(service)
        LOG.debug("Query unsupported for %r, found %d start links", service, count)
        return count >= START_LINK_THRESHOLD
    else:
        return False


def enable(service: Service) -> Result[None]:
    """
    Enable an init script's start links.
    """
    command([commands.path("update-rc.d"), service, "enable"])
    LOG.debug("Enabled init script: %r", service)
    return Result(State.success)


def disable(service: Service) -> Result[None]:
    """
    Disable an init script's start links.
    """
    command([commands.path("update-rc.d"), service, "disable"])
    LOG.debug("Disabled init script: %r", service)
    return Result(State.success)
