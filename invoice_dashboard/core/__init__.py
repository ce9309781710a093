"""
Core application utilities for settings, logging and domain errors.

This package provides:
- Application-level settings (separate from DB settings)
- Logging configuration with the current fetch operation in every record
- The StoreFailure domain error raised by the fetchers
"""
