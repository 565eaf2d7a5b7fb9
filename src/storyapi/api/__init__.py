"""FastAPI application and REST API endpoints.

This module contains:
- Main FastAPI application configuration
- Authentication gate
- Story request handler and endpoints
"""
