"""
Test suite for Advanced Calculator

Contains:
- tests/unit/          : Unit tests for kernel, reporter, config, driver and CLI
"""
