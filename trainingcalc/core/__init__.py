"""
Core business logic for training metrics.

This module is framework-agnostic - it doesn't read configuration, print,
or touch the environment. Everything here is a pure function of the
session values passed in.
"""
