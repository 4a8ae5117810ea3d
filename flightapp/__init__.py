"""
Flight App Package.

Minimal in-memory CRUD service for flight records, built with Flask.

Modules:
    api/         REST endpoints for flight records and system status
    store.py     Thread-safe in-memory flight store with lenient id lookup
    config.py    Centralized configuration from environment variables
    app.py       Application factory and development server
"""

__version__ = '1.0.0'
