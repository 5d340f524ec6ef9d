"""
Crate Version Check

Query crates.io for the latest version of a crate and compare it with the
version currently running.
"""

__version__ = "0.1.0"

from .client import RegistryClient
from .errors import ParseFailure, QueryError, RequestFailure, VersionSyntaxError
from .models import Comparison, Status, StatusKind
from .pipeline import VersionQuery, get, query
from .reporting import output, output_to_writer, output_with_term
from .versioning import SemanticVersion

__all__ = [
    "Comparison",
    "ParseFailure",
    "QueryError",
    "RegistryClient",
    "RequestFailure",
    "SemanticVersion",
    "Status",
    "StatusKind",
    "VersionQuery",
    "VersionSyntaxError",
    "get",
    "output",
    "output_to_writer",
    "output_with_term",
    "query",
]
