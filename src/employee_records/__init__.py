"""Employee Records package.

Organized by feature modules (employees, ...) with a thin Flask controller
layer over an in-memory repository and a stateless query/update service.
"""

__version__ = "0.1.0"
