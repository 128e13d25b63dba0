"""urlbench - side-by-side micro-benchmarks for URL implementations."""

from urlbench.version.urlbench_version import URLBENCH_VERSION, Version

__version__ = str(URLBENCH_VERSION)
__version_info__ = URLBENCH_VERSION

__all__ = [
    "URLBENCH_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
