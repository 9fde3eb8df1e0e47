"""
handlers/ - Presentation Layer
================================
Flask blueprints. Each handler parses the HTTP request, delegates to
the appropriate Repository, and turns the result into a JSON response.
No business logic lives here.
"""
