"""Utilities for use across the entire package."""

import logging
import os

from slideheaders.internals import constants

log = logging.getLogger("slideheaders")


# region get_debug_mode
def get_debug_mode() -> bool:
    """Determine debug mode by checking whether there's an env variable set; otherwise fallback to bool constant."""

    # 1. Check env variable
    env_debug_str = os.environ.get("SLIDEHEADERS_DEBUG")
    if env_debug_str is not None:
        try:
            return str_to_bool(env_debug_str)
        except ValueError:
            # Set but invalid ("bob"): warn and fall through to default
            log.warning(
                f"Warning: Invalid value for SLIDEHEADERS_DEBUG env var: '{env_debug_str}'. Using default."
            )

    # 2. Fallback: the system default constant
    return constants.DEBUG_MODE_DEFAULT


# endregion


# region str_to_bool
def str_to_bool(value: str) -> bool:
    """Convert strings "True"/"False" to  booleans"""
    if value.lower().strip() in {"false", "f", "0", "no", "n"}:
        return False
    elif value.lower().strip() in {"true", "t", "1", "yes", "y"}:
        return True
    else:
        log.warning(f"{value} is not a valid boolean value.")
        raise ValueError(f"{value} is not a valid boolean value.")


# endregion
