"""
Shared utilities for readme-check.
"""
