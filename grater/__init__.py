"""
grater

Keeps the workstation awake by moving the mouse cursor to a random spot
on the primary monitor at random intervals until its window is closed.
"""

__version__ = "1.0.0"
__author__ = "grater Team"
