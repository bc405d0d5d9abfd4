"""
API package containing the dashboard routes.

``router`` includes every domain router; endpoint modules live in the
``endpoints`` subpackage.
"""
