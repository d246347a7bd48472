"""
Stateless utility functions grouped by the kind of data they operate on.

Includes sequence helpers (array), numeric helpers (number), and record
helpers (object), plus the UnsupportedTypeError raised by record sorting.
"""
