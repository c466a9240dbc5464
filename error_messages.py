# error_messages.py
"""
User-friendly error messages with recovery suggestions for the booking calendar.
Provides consistent, actionable error communication across the application.
"""

class ErrorMessages:
    """Centralized error message definitions with user-friendly language and recovery suggestions."""

    # Booking Data Errors
    INVALID_EVENT_DATE = {
        'title': 'Invalid Booking Date',
        'message': 'A booking has a date that could not be read and was left off the calendar.',
        'suggestions': [
            'Open the booking and re-enter its dates',
            'Dates must use the YYYY-MM-DD format'
        ],
        'code': 'DATA_001'
    }

    INVERTED_DATE_RANGE = {
        'title': 'Booking Ends Before It Starts',
        'message': 'A booking ends before its start date and is shown as a single day.',
        'suggestions': [
            'Check the end date of the booking'
        ],
        'code': 'DATA_002'
    }

    BOOKING_FILE_INVALID = {
        'title': 'Booking Data Error',
        'message': 'The booking export could not be loaded.',
        'suggestions': [
            'Export the bookings again from the server',
            'Make sure the file contains a "clients" list'
        ],
        'code': 'DATA_003'
    }

    BOOKING_FILE_NOT_FOUND = {
        'title': 'File Not Found',
        'message': 'The booking export file does not exist.',
        'suggestions': [
            'Check the file path',
            'Export the bookings again from the server'
        ],
        'code': 'FILE_001'
    }

    # Configuration Errors
    SETTINGS_INVALID = {
        'title': 'Settings Error',
        'message': 'The application configuration contains invalid data.',
        'suggestions': [
            'Configuration will be reset to defaults',
            'Reconfigure your preferences'
        ],
        'code': 'CONFIG_001'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error occurred.',
        'suggestions': [
            'Restart the application'
        ],
        'code': 'GENERAL_001'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)

    @staticmethod
    def format_suggestions(suggestions):
        """Format suggestion list for display."""
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_message(cls, error_type, detail=None):
        """Build the exception from an ErrorMessages entry."""
        info = ErrorMessages.get_message(error_type)
        message = info['message'] if detail is None else f"{info['message']} ({detail})"
        return cls(message, error_code=info['code'], suggestions=list(info['suggestions']))


class InvalidEventDateError(CalendarError):
    """Exception for booking dates that are not ISO YYYY-MM-DD."""
    pass


class BookingDataError(CalendarError):
    """Exception for malformed booking exports."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
