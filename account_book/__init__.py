"""
Account Book - Source Package

A small household ledger: a form UI records income and outgo entries,
and a JSON API stores them in a spreadsheet with one sheet per month.

DESIGN PRINCIPLES:
1. The spreadsheet is the only persistent store
2. Validate on both sides of the wire
3. Every failure reaches the caller as a readable message
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Account Book Team"
