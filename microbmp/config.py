import os

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


def default_loglevel() -> str:
    """
    MICROBMP_DEBUG wins over MICROBMP_LOGLEVEL. Unknown level names fall
    back to INFO silently, since this runs before logging is configured.
    """
    if getflag("MICROBMP_DEBUG"):
        return "DEBUG"
    level = os.environ.get("MICROBMP_LOGLEVEL", "INFO").upper()
    if level not in LOG_LEVELS:
        return "INFO"
    return level
