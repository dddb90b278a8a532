"""Vendor media API module."""
from .client import MediaApiClient, get_media_api_client

__all__ = ['MediaApiClient', 'get_media_api_client']
