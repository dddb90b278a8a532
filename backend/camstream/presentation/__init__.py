"""Presentation Layer - HTTP routes and pages."""
