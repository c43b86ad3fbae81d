#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/utils/__init__.py
"""Utility modules for the richtext package."""
