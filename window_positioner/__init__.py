"""
Window Positioner

D-Bus service for locating windows by title or WM_CLASS and setting their
position and size, with active-window and monitor-layout queries.
"""

__version__ = "1.0.0"
__author__ = "NixOS Configuration Team"
