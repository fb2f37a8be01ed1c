"""
creditrank

Credit-rating reference data: agency notation validation, unique rank
assignment and investment/speculative-grade classification.
"""

__version__ = "0.1.0"
