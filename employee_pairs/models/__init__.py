"""
Models package - Data models and type definitions.
"""

from .records import DateFormat, RawRow, EmployeeRecord, EmployeePair

__all__ = ['DateFormat', 'RawRow', 'EmployeeRecord', 'EmployeePair']
