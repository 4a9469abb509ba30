"""SMTP email adapter."""

from .client import MockEmailClient, RealSMTPEmailClient

__all__ = ["RealSMTPEmailClient", "MockEmailClient"]
