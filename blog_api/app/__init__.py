"""
Application package initializer.

The project is split into a small number of layers: ``core`` holds
configuration, logging, database and error plumbing; ``schemas``
defines the pydantic payloads exchanged over HTTP; ``services``
contains persistence and business logic; ``api`` exposes versioned
routers.  Blogs and their entries are the only domains.
"""

from .main import app  # noqa: F401
