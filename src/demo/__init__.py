"""
Demo driver: the fixed labeled sequence of calculator results.
"""

from src.demo.driver import CalculatorDemo, run_demo

__all__ = [
    "CalculatorDemo",
    "run_demo",
]
