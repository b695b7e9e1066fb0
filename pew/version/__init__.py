from pew.version.pew_version import PEW_VERSION, Version

__all__ = ["PEW_VERSION", "Version"]
