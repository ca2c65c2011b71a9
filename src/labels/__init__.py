"""Structured label types.

This package holds label types that can replace raw label strings
as record associations. Types are registered by identifier in LABEL_TYPES.
"""
