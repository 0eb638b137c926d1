#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for md2blocks: truncation, escaping, URL checks and validation."""
