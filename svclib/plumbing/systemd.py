"""
Service management through systemd.
"""

from functools import lru_cache
import logging
import os.path
import re
from typing import Dict

from .common import command, Result, Service, State
from . import commands, paths


LOG = logging.getLogger(__name__)

_UNIT_FILE = re.compile(r"^(\S+)\.service[ \t]+(disabled|enabled)(?:[ \t]+\S+)?[ \t]*$",
                        re.IGNORECASE | re.MULTILINE)


@lru_cache(maxsize=None)
def supports_systemd() -> bool:
    """
    Test if systemd is the running init system.  The answer is fixed for the life of the process.
    """
    supported = os.path.isdir(paths.SYSTEMD_RUNTIME)
    LOG.debug("systemd %s", "available" if supported else "not available")
    return supported


def _systemctl(*args: str, output: bool = False, check: bool = True):
    return command([commands.path("systemctl")] + list(args), output=output, check=check)


def is_sysv_unit(service: Service) -> bool:
    """
    Test if a service's unit is generated from an init script, rather than a native unit file.

    The systemd-sysv generator sets each unit's `SourcePath` to the init script.  Template units
    report their template name, so instance separators are removed from the query.
    """
    proc = _systemctl("show", "-pSourcePath", service.replace("@", ""), output=True)
    source = proc.stdout.decode("utf-8").strip()
    return source.startswith("SourcePath={}/".format(paths.INIT_D))


def list_unit_files() -> Dict[str, Service]:
    """
    Look up all service unit files with an enabled or disabled state.
    """
    proc = _systemctl("list-unit-files", "--type", "service", "--full", "--all", "--no-pager",
                      output=True)
    units: Dict[str, Service] = {}
    for name, _ in _UNIT_FILE.findall(proc.stdout.decode("utf-8")):
        units[name] = Service(name)
    return units


def is_enabled(service: Service) -> bool:
    """
    Ask systemd if a service will start at boot.  Disabled, static and unknown units all report a
    failing exit status.
    """
    return _systemctl("is-enabled", service, output=True, check=False).returncode == 0


def enable(service: Service) -> Result[None]:
    """
    Enable a unit to start at boot.
    """
    _systemctl("enable", service)
    LOG.debug("Enabled unit: %r", service)
    return Result(State.success)


def disable(service: Service) -> Result[None]:
    """
    Stop a unit from starting at boot.
    """
    _systemctl("disable", service)
    LOG.debug("Disabled unit: %r", service)
    return Result(State.success)
