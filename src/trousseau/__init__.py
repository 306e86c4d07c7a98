"""
Trousseau - Solana account generation and balance lookup.
"""

__version__ = "0.1.0"
