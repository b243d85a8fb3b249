"""
Error Handlers for Book Exchange

Provides:
- Base exception class carrying an error code and HTTP status
- Consistent error response format
- Flask error handlers
"""

from flask import jsonify, request, current_app
from typing import Optional, Dict, Any


class BookExchangeError(Exception):
    """Base exception class for Book Exchange."""

    def __init__(
        self,
        message: str,
        code: str = 'UNKNOWN_ERROR',
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert error to dictionary for JSON response."""
        return {
            'success': False,
            'error': self.__class__.__name__,
            'message': self.message,
            'code': self.code,
            'details': self.details
        }


def error_response(
    message: str,
    code: str = 'ERROR',
    status_code: int = 400,
    details: Dict = None
) -> tuple:
    """Create a standardized error response."""
    response = {
        'success': False,
        'message': message,
        'code': code
    }
    if details:
        response['details'] = details

    return jsonify(response), status_code


def success_response(data: Any = None, message: str = None) -> dict:
    """Create a standardized success response."""
    response = {'success': True}
    if data is not None:
        response['data'] = data
    if message:
        response['message'] = message
    return response


def handle_book_exchange_error(error: BookExchangeError):
    """Render an application error as JSON and log it by severity."""
    if error.status_code >= 500:
        current_app.logger.error("%s: %s", error.code, error.message)
    else:
        current_app.logger.warning("%s: %s", error.code, error.message)
    return jsonify(error.to_dict()), error.status_code


def register_error_handlers(app):
    """Register error handlers with Flask app."""

    app.register_error_handler(BookExchangeError, handle_book_exchange_error)

    @app.errorhandler(404)
    def handle_not_found(error):
        if request.path.startswith('/api/'):
            return error_response('Endpoint not found', 'NOT_FOUND', 404)
        return error

    @app.errorhandler(500)
    def handle_internal_error(error):
        current_app.logger.exception('Internal server error')
        if request.path.startswith('/api/'):
            return error_response('Internal server error', 'SERVER_ERROR', 500)
        return error
