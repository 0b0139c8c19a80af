"""Process exit codes of the taskmirror CLI.

Scripts can tell a missing task (5) apart from a store that returned no
data at all (4).
"""

SUCCESS = 0
ERROR_GENERAL = 1
ERROR_INVALID_ARGS = 2  # bad option value, empty task
ERROR_UNAVAILABLE = 4  # neither local nor remote returned data
ERROR_NOT_FOUND = 5

_NAMES = {
    SUCCESS: "SUCCESS",
    ERROR_GENERAL: "ERROR_GENERAL",
    ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
    ERROR_UNAVAILABLE: "ERROR_UNAVAILABLE",
    ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
}


def get_exit_code_name(code: int) -> str:
    """Symbolic name of an exit code, for log lines."""
    return _NAMES.get(code, f"UNKNOWN({code})")
