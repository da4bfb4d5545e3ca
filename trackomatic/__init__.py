"""Screen state, configuration, time zone table and timestamp helpers for a time tracker."""

__version__ = "1.0.0"