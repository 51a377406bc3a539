"""
readme-check

Validates a module README against its publication contract: required
section headers, required tables with exact column headers, and reachable
hyperlinks (with registry-aware verification of provider URLs).
"""

__version__ = "1.0.0"
