"""busbook: an in-memory bus seat reservation tracker."""

__version__ = "0.1.0"
