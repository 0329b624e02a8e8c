"""Runtime settings for catalog loading and reporting.

Each value can be overridden through an environment variable of the same name.
"""

import os
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parent.parent

# Base URL or local directory holding providers, rockets and launches
CATALOG_SOURCE = os.environ.get(
    "CATALOG_SOURCE", str(PACKAGE_ROOT / "data" / "catalog")
)
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "30"))

# Report defaults
DEFAULT_TOP_K = int(os.environ.get("DEFAULT_TOP_K", "3"))
REPORT_ORBIT = os.environ.get("REPORT_ORBIT", "LEO")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def catalog_location(kind_name: str, source: str | None = None) -> str:
    """Where the records of one kind live under ``source``.

    URLs get ``/{kind}`` appended, directories ``/{kind}.json``.
    """
    source = source or CATALOG_SOURCE
    if is_remote(source):
        return f"{source.rstrip('/')}/{kind_name}"
    return str(Path(source) / f"{kind_name}.json")
