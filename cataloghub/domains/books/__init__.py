"""Book providers."""

from cataloghub.domains.books.googlebooks import GOOGLEBOOKS
from cataloghub.domains.books.openlibrary import OPENLIBRARY

PROVIDERS = (GOOGLEBOOKS, OPENLIBRARY)

__all__ = ["GOOGLEBOOKS", "OPENLIBRARY", "PROVIDERS"]
