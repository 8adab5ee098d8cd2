"""
Data Broker API Layer

FastAPI-based HTTP surface over the data broker.
"""

from .config import config

__all__ = ["config"]
