"""
Loop Snap CLI - Command-line interface for the snap engine.

Usage:
    loop-snap list --group halves
    loop-snap resolve LeftTwoThirds --screen 0 0 1920 1080
    loop-snap classify --pointer 600 750 --screen 0 0 1200 800
    loop-snap replay config/drags/bottom_edge.yaml
"""

__version__ = "1.0.0"
