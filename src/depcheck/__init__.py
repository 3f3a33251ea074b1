"""depcheck - dependency identity evidence scanner.

Collects vendor, product and version evidence from project files so that
dependencies can be identified.
"""

__version__ = "0.1.0"
