"""
Named Queries API - saved aggregation pipelines with display metadata.
"""

__version__ = "0.1.0"
