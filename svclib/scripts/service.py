"""
Scripts to inspect and control services.
"""

import sys

from .utils import confirm, DocOptArgs, entrypoint, ServiceName
from ..plumbing.common import Service
from ..tasks import services


@entrypoint
def list_all(opts: DocOptArgs):
    """
    List all services known to the host, with their boot state.

    Usage: {script} [--names]
    """
    for svc in sorted(services.list_services()):
        if opts["--names"]:
            print(svc)
        else:
            print("{}\t{}".format(svc, "enabled" if services.is_enabled(svc) else "disabled"))


@entrypoint
def enabled(service: Service):
    """
    Check if a service will start at boot.  Exits with a failing status if not.

    Usage: {script} SERVICE
    """
    if services.is_enabled(service):
        print("enabled")
    else:
        print("disabled")
        sys.exit(1)


@entrypoint
def enable(opts: DocOptArgs, service: Service):
    """
    Enable a service to start at boot.

    Usage: {script} SERVICE [--yes]
    """
    if not opts["--yes"]:
        confirm("Enable {} at boot?".format(service))
    print(services.ensure_enabled(service, True))


@entrypoint
def disable(opts: DocOptArgs, service: Service):
    """
    Prevent a service from starting at boot.

    Usage: {script} SERVICE [--yes]
    """
    if not opts["--yes"]:
        confirm("Disable {} at boot?".format(service))
    print(services.ensure_enabled(service, False))


@entrypoint
def start(service: ServiceName):
    """
    Start a service.

    Usage: {script} SERVICE
    """
    print(services.start(service))


@entrypoint
def stop(service: ServiceName):
    """
    Stop a service.

    Usage: {script} SERVICE
    """
    print(services.stop(service))


@entrypoint
def restart(opts: DocOptArgs, service: ServiceName):
    """
    Restart a service.

    If the service's init script doesn't support restarting, omit --has-restart to stop and start
    it instead.

    Usage: {script} SERVICE [--has-restart]
    """
    print(services.restart(service, bool(opts["--has-restart"])))


@entrypoint
def status(opts: DocOptArgs, service: ServiceName):
    """
    Check if a service is running.  Exits with status 3 if not, like an init script.

    Without --has-status, the process table is searched for PATTERN, or the service name if none
    is given.

    Usage: {script} SERVICE [--has-status] [--pattern=PATTERN]
    """
    if services.is_running(service, bool(opts["--has-status"]), opts["--pattern"]):
        print("running")
    else:
        print("stopped")
        sys.exit(3)
