"""
schemadoc: names and collects data-shape declarations for Swagger docs.
"""
__version__ = "0.1.0"
