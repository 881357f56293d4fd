"""Implementações concretas de envio de SMS."""

from .http_sender import HttpSmsSender

__all__ = ["HttpSmsSender"]
