"""
Core components for sceneparse.

This module contains the release parsing engine and its data structures.
"""
