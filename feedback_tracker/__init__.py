"""
Feedback Tracker Console Package

Client-side views for an employee performance-feedback tracker, organized
along Clean Architecture layers.
"""

from feedback_tracker.container import Container, create_container
from feedback_tracker.main import create_app

__all__ = ["Container", "create_container", "create_app"]
