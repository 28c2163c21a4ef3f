"""
Test fixtures for the Carrier Sales API.

Contains sample data for testing:
- loads.json: five loads covering substring, case and rate-boundary cases
"""
