"""Cross-platform path resolution for user directories.

Uses platformdirs to find the OS-appropriate location for log files.
"""

from pathlib import Path

from platformdirs import user_log_dir  # Gives us the "right" place for logs on each OS

PACKAGE_NAME = "slideheaders"


# region user_log_dir_path
def user_log_dir_path() -> Path:
    """
    Directory for log files, created if missing.

    Returns:
        Path to the per-user log directory for slideheaders

    Examples:
        Windows: C:/Users/YourName/AppData/Local/slideheaders/Logs/
        macOS: /Users/YourName/Library/Logs/slideheaders/
        Linux: /home/yourname/.local/state/slideheaders/log/
    """
    log_dir = Path(user_log_dir(PACKAGE_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


# endregion
