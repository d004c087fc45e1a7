"""
Command-line entrypoints, installed as `svclib-<module>-<function>` console scripts.
"""
