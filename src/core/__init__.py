"""
Core numeric kernel, domain value types, and configuration.

This package is independent of console output: nothing here prints.
"""
