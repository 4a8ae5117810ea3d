"""
Flight record API endpoints.

Provides endpoints for:
- POST /flights - Create a flight record
- GET /flights - List all flight records
- GET /flights/<id> - Get a single flight record
- PUT /flights/<id> - Merge fields into a flight record
- DELETE /flights/<id> - Remove a flight record

Bodies are stored and echoed exactly as sent; no field is validated.
"""

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from flightapp.store import FlightNotFoundError, FlightStore

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/flights')

NOT_FOUND_MESSAGE = 'Flight not found'


def get_store() -> FlightStore:
    """The store owned by the running application."""
    return current_app.config['FLIGHT_STORE']


def _request_body():
    """
    Decoded JSON body of the current request.

    Missing, non-JSON or undecodable bodies become an empty object.
    """
    body = request.get_json(silent=True)
    return {} if body is None else body


@flights_bp.errorhandler(FlightNotFoundError)
def flight_not_found(e: FlightNotFoundError):
    return Response(NOT_FOUND_MESSAGE, status=404, mimetype='text/plain')


@flights_bp.route('', methods=['POST'], strict_slashes=False)
def create_flight():
    """Append the request body to the store and echo it back."""
    store = get_store()
    flight = store.create(_request_body())
    return jsonify(store.snapshot(flight)), 201


@flights_bp.route('', methods=['GET'], strict_slashes=False)
def list_flights():
    store = get_store()
    return jsonify(store.snapshot(store.list()))


@flights_bp.route('/<flight_id>', methods=['GET'], strict_slashes=False)
def get_flight(flight_id: str):
    store = get_store()
    return jsonify(store.snapshot(store.get(flight_id)))


@flights_bp.route('/<flight_id>', methods=['PUT'], strict_slashes=False)
def update_flight(flight_id: str):
    """
    Merge the request body into an existing flight.

    Fields missing from the body are left untouched.
    """
    store = get_store()
    flight = store.update(flight_id, _request_body())
    return jsonify(store.snapshot(flight))


@flights_bp.route('/<flight_id>', methods=['DELETE'], strict_slashes=False)
def delete_flight(flight_id: str):
    """Remove a flight; the response is a list holding the removed record."""
    removed = get_store().delete(flight_id)
    logger.info(f'Flight {flight_id} deleted, {len(get_store())} remaining')
    return jsonify(removed)
