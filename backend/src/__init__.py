"""
Core package for the backend service.

This package contains the main application logic and components including:
- Data classes for attachments, content parts and results
- Services for attachment handling, model calls and the chat pipeline
- API routes, middleware and the error taxonomy
"""
