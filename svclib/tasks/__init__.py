"""
Higher-level methods to interact with services.

Each public function in this module should:

- perform a complete task, as needed by a script or user action
- avoid non-idempotent calls unless required by a prior state change
- pick the init system to use, rather than leaving it to the caller
"""
