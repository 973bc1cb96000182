"""Minimal version helper for the screen_ruler application."""

from importlib import metadata
from pathlib import Path

DIST_NAME = "screen-ruler"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for application.

    :return: Version number.
    """
    try:  # installed
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:  # dev, running from the source tree
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        return str(
            setuptools_scm.get_version(root=root, fallback_version=FALLBACK_VERSION)
        )


__all__ = ["get_version"]
