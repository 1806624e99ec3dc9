"""
fovscan: simulated forward ranging sensor for a field robot.
"""

__version__ = "0.1.0"
