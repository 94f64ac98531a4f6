"""Endpoint functions for the posts resource."""
