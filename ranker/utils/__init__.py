"""
Utils module - Shared utilities for ranker

This module provides common utilities used across the project:
- io_helpers: BOM-safe file I/O and terminal encoding
- logging_helper: Consistent logging setup
- paths: Common path definitions
"""
