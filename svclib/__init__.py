"""
Boot enablement and lifecycle control of services on Debian hosts, whether managed by init scripts,
systemd, or both.
"""
