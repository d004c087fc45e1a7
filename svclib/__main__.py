import code
import logging

from svclib.plumbing import commands, paths, service, systemd, sysv
from svclib.plumbing.common import *
from svclib.tasks import services


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    code.interact(local=globals())
