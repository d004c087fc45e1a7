"""
Services across both init systems, preferring systemd where it's available.
"""

import logging
import subprocess
from typing import Dict, Iterable, Optional, Set

from ..plumbing import paths, service, systemd, sysv
from ..plumbing.common import Collect, Result, Service, State


LOG = logging.getLogger(__name__)


def _unit_files() -> Dict[str, Service]:
    # Some hosts refuse to list unit files, which shouldn't hide the init scripts.
    try:
        return systemd.list_unit_files()
    except (subprocess.CalledProcessError, OSError) as ex:
        LOG.warning("Couldn't list systemd unit files: %s", ex)
        return {}


def list_services(search_path: Iterable[str] = paths.SEARCH_PATH) -> Set[Service]:
    """
    Find all services on the host.

    Init scripts are merged with systemd unit files, rather than asking systemd for all units, as
    it only reports enabled init scripts.  Where a name exists in both, the unit is kept, as it may
    be a shim generated for the script.
    """
    found: Dict[str, Service] = {}
    if systemd.supports_systemd():
        found.update(_unit_files())
    for script in sysv.list_scripts(search_path):
        found.setdefault(script, script)
    return set(found.values())


def get_service(name: str) -> Service:
    """
    Look up a service by name, raising `KeyError` if the host doesn't know about it.
    """
    for svc in list_services():
        if svc == name:
            return svc
    raise KeyError(name)


def is_enabled(svc: Service) -> bool:
    """
    Test if a service will start at boot.

    Units generated from init scripts have no enabled state in systemd, so are handled along with
    hosts without systemd by querying the script's policy.
    """
    if systemd.supports_systemd() and not systemd.is_sysv_unit(svc):
        return systemd.is_enabled(svc)
    else:
        return sysv.is_enabled(svc)


def enable(svc: Service) -> Result[None]:
    """
    Enable a service to start at boot.
    """
    if systemd.supports_systemd():
        return systemd.enable(svc)
    else:
        return sysv.enable(svc)


def disable(svc: Service) -> Result[None]:
    """
    Prevent a service from starting at boot.
    """
    if systemd.supports_systemd():
        return systemd.disable(svc)
    else:
        return sysv.disable(svc)


@Result.collect
def ensure_enabled(svc: Service, enabled: bool = True) -> Collect[None]:
    """
    Enable or disable a service, if not already in the requested state.
    """
    if is_enabled(svc) == enabled:
        yield Result(State.unchanged)
    elif enabled:
        yield enable(svc)
    else:
        yield disable(svc)


def start(svc: Service) -> Result[None]:
    return service.start(svc)


def stop(svc: Service) -> Result[None]:
    return service.stop(svc)


@Result.collect
def restart(svc: Service, has_restart: bool = False) -> Collect[None]:
    """
    Restart a service, or stop and start it again if it can't restart itself.
    """
    args = service.restart_args(svc, has_restart)
    if args:
        yield service.run(args)
    else:
        LOG.debug("No native restart for %r, stopping and starting", svc)
        yield service.stop(svc)
        yield service.start(svc)


def is_running(svc: Service, has_status: bool = False, pattern: Optional[str] = None) -> bool:
    """
    Test if a service is running, using its own status check if it has one, or otherwise by looking
    for a matching process.
    """
    status = service.get_status(svc, has_status)
    if status is not None:
        return status == 0
    return service.get_pid(pattern or svc) is not None
