"""Hotels app package.

This app encapsulates hotel listings and their rooms: search by name,
location and rating, room filtering by type, price and date-scoped
availability, and nightly price quotes.
"""
