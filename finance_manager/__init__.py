"""Mini README: Core package initializer for the smart finance manager.

The package is split into the ``ledger`` core (transactions, aggregation and
flat-file persistence) and the ``interface`` front ends (console menu and JSON
web API). Only the logging helper is re-exported here so importing the package
stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
