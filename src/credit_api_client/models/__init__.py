"""Data models for the credit API."""

from .errors import MessageBody, ValidationErrors
from .simulation import Simulation

__all__ = ["MessageBody", "Simulation", "ValidationErrors"]
