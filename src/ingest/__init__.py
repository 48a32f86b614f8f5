"""Monthly export ingestion.

This module discovers and parses vendor monthly JSON exports.
It drives the import pipeline from discovery through loading.
"""
