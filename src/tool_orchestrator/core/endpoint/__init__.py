"""Endpoint protocol and output stream models."""

from .models import Endpoint, EndpointOutput, Token

__all__ = ["Endpoint", "EndpointOutput", "Token"]
