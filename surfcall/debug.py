# ABOUTME: Debug logging helper gated on the DEBUG environment flag
# ABOUTME: Prints tagged trace lines to stdout so rule decisions can be followed locally

from surfcall.config import Config


def debug_log(message: str, component: str = "ENGINE") -> None:
    """Print a tagged debug line when DEBUG=true, otherwise do nothing."""
    if Config.DEBUG:
        print(f"[DEBUG] [{component}] {message}")
