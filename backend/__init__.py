"""
Backend package for the attachment chat application.

This package contains the backend service components including:
- Flask application and API routes
- Attachment validation, transient storage and prompt assembly
- Gemini integration and response normalization
- Configuration and prompt texts
"""

import logging
import os

# Configure logging with clickable paths before anything else imports logging
logging.basicConfig(
    level=logging.INFO, format="%(levelname)s: %(pathname)s:%(lineno)d %(message)s"
)


class ClickablePathFilter(logging.Filter):
    """Filter to make file paths clickable in the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "pathname"):
            workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            try:
                record.pathname = os.path.relpath(record.pathname, workspace_root)
            except ValueError:
                # Different drive on Windows
                pass
        return True


# Apply filter to the root handlers so records from every logger pass through it
for _handler in logging.getLogger().handlers:
    _handler.addFilter(ClickablePathFilter())
