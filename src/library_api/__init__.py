"""Library API.

REST service for managing book records: create, retrieve, update, delete and
a filtered, paginated search over the catalog.
"""

__version__ = "0.1.0"
