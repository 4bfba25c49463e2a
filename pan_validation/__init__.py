"""PAN cleaning & validation toolkit.

Cleans raw PAN identifier strings, classifies each distinct cleaned value as
Valid/Invalid using a structural pattern plus heuristic anomaly detectors,
and aggregates summary statistics.
"""

__version__ = "0.1.0"
