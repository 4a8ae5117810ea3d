"""
API module for the flight app.

Provides REST endpoints for:
- Flight records (create, list, get, update, delete)
- System status
"""

from flightapp.api.flights import flights_bp
from flightapp.api.metrics import metrics_bp

__all__ = ['flights_bp', 'metrics_bp']
