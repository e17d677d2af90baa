"""Catalog REST API."""
