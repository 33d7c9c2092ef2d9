"""Client, pager and installer for browsing and installing BadgeHub applications."""

__version__ = "0.1.0"
__all__ = ["__version__"]