"""Source parsers.

This package turns source streams into parallel vector and label results.
Parsers are registered by identifier in PARSERS.
"""
