"""
Filesystem locations used to inspect the host's init systems.
"""

SYSTEMD_RUNTIME = "/run/systemd/system"
"""
Runtime directory only present when systemd is the running init system.
"""

INIT_D = "/etc/init.d"
"""
Directory holding legacy init scripts.
"""

SEARCH_PATH = (INIT_D,)
"""
Directories scanned for init scripts when listing services.
"""

RC_D = "/etc/rc*.d"
"""
Glob matching the run-level directories of start and kill symlinks.
"""

UPSTART_JOB = "/lib/init/upstart-job"
"""
Compatibility wrapper that upstart jobs symlink to from the init script directory.
"""
