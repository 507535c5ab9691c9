"""
Exit codes for the taskkeeper CLI.

Semantic exit codes so scripts calling the CLI can tell what happened.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Resource not found
ERROR_NOT_FOUND = 5


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Command executed successfully",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_NOT_FOUND: "Task not found",
    }
    return descriptions.get(code, "Unknown error")
