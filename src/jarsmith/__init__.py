"""
Jarsmith - build planner for Java modules.

Computes classpaths, jar merge sets and the ordered transform stages of
Java library, binary and prebuilt modules, without running any tool.
"""

__version__ = "0.1.0"
