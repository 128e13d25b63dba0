from urlbench.version.urlbench_version import URLBENCH_VERSION, Version

__all__ = ["URLBENCH_VERSION", "Version"]
