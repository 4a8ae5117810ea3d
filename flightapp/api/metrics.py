"""
Metrics API endpoints.

Provides endpoints for:
- GET /api/metrics/status - Store statistics and configuration info
"""

import logging
import time
from datetime import datetime, timezone

from flask import Blueprint, jsonify

from flightapp.api.flights import get_store
from flightapp.config import config

logger = logging.getLogger(__name__)

metrics_bp = Blueprint('metrics', __name__, url_prefix='/api/metrics')


@metrics_bp.route('/status', methods=['GET'])
def get_system_status():
    """
    Get system status information.

    Returns:
    - Store statistics (record count, mutation and miss counters)
    - Configuration info
    """
    start_time = time.perf_counter()

    store_stats = get_store().stats

    query_time_ms = (time.perf_counter() - start_time) * 1000

    return jsonify({
        'status': 'ok',
        'store': store_stats,
        'config': {
            'debug': config.debug,
            'port': config.server.port,
        },
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'query_time_ms': round(query_time_ms, 2),
    })
