"""
Exit codes for Pomodoro TUI.

Semantic exit codes so wrapping scripts can tell a normal quit from a
bad invocation or a lost terminal.
"""

# Success (user quit with q/Esc)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Terminal input could not be polled or read
ERROR_TERMINAL_IO = 3

# Interrupted with Ctrl-C
ERROR_INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_TERMINAL_IO: "ERROR_TERMINAL_IO",
        ERROR_INTERRUPTED: "ERROR_INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Timer closed normally",
        ERROR_GENERAL: "A general error occurred",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_TERMINAL_IO: "Terminal input failed - is stdin a TTY?",
        ERROR_INTERRUPTED: "Interrupted by user",
    }
    return descriptions.get(code, "Unknown error")
