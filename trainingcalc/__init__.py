"""
Training Calculator - derived fitness metrics for training sessions.

This package contains the complete application:
- core: Framework-agnostic metric calculations and report formatting
- config: Application configuration
- main: Command-line driver printing sample summaries
"""

__version__ = "0.1.0"
