"""Run, compare and check macro kata exercises, with worked kata examples."""

__version__ = "0.3.1"