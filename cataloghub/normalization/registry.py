"""Domain schema registry.

Maps a content-type tag to the Pydantic model validating the ``details``
sub-document. A registry is built once and is read-only afterwards; pass
it explicitly to normalizers so tests can substitute their own.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ValidationError

from cataloghub.normalization.details import (
    AnimeDetails,
    BoardGameDetails,
    BookDetails,
    CollectibleDetails,
    ConstructToyDetails,
    MangaDetails,
    MovieDetails,
    MusicDetails,
    ProductDetails,
    SeriesDetails,
    TcgCardDetails,
    VideogameDetails,
)
from cataloghub.normalization.schema import ContentType

DetailsSchema = type[BaseModel]


@dataclass(frozen=True)
class DetailsValidation:
    """Outcome of validating one details sub-document.

    ``details`` is the validated document on success and the best-effort
    input otherwise; it is always a dict.
    """

    details: dict[str, Any]
    valid: bool
    schema_found: bool
    errors: list[str] = field(default_factory=list)


def format_validation_errors(exc: ValidationError) -> list[str]:
    """Render Pydantic errors as ``path: message`` strings."""
    formatted = []
    for error in exc.errors():
        path = ".".join(str(part) for part in error["loc"]) or "<root>"
        formatted.append(f"{path}: {error['msg']}")
    return formatted


class SchemaRegistry:
    """Immutable mapping from content type to details schema."""

    def __init__(self, schemas: Mapping[str | ContentType, DetailsSchema]):
        self._schemas: Mapping[str, DetailsSchema] = MappingProxyType(
            {_tag(key): schema for key, schema in schemas.items()}
        )

    def get_details_schema(self, content_type: str | ContentType) -> DetailsSchema | None:
        """Return the details schema for a type, or None when unregistered."""
        return self._schemas.get(_tag(content_type))

    def types(self) -> list[str]:
        """List registered content types."""
        return list(self._schemas.keys())

    def __contains__(self, content_type: object) -> bool:
        if not isinstance(content_type, (str, ContentType)):
            return False
        return _tag(content_type) in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def validate_details(self, content_type: str | ContentType, details: Any) -> DetailsValidation:
        """Validate a details document against the schema for its type.

        Never raises for bad data. An unregistered type passes the
        document through unvalidated; a validation failure keeps the
        best-effort input and reports which fields failed.
        """
        if details is None:
            details = {}
        best_effort = details if isinstance(details, dict) else {}
        schema = self.get_details_schema(content_type)
        if schema is None:
            return DetailsValidation(details=best_effort, valid=True, schema_found=False)

        try:
            validated = schema.model_validate(details)
        except ValidationError as e:
            return DetailsValidation(
                details=best_effort,
                valid=False,
                schema_found=True,
                errors=format_validation_errors(e),
            )

        return DetailsValidation(
            details=validated.model_dump(by_alias=True),
            valid=True,
            schema_found=True,
        )


def _tag(content_type: str | ContentType) -> str:
    return content_type.value if isinstance(content_type, ContentType) else str(content_type)


def build_default_registry() -> SchemaRegistry:
    """Build the registry covering every ContentType."""
    return SchemaRegistry(
        {
            ContentType.CONSTRUCT_TOY: ConstructToyDetails,
            ContentType.BOOK: BookDetails,
            ContentType.VIDEOGAME: VideogameDetails,
            ContentType.MOVIE: MovieDetails,
            ContentType.SERIES: SeriesDetails,
            ContentType.ANIME: AnimeDetails,
            ContentType.MANGA: MangaDetails,
            ContentType.TCG_CARD: TcgCardDetails,
            ContentType.BOARD_GAME: BoardGameDetails,
            ContentType.MUSIC: MusicDetails,
            ContentType.COLLECTIBLE: CollectibleDetails,
            ContentType.PRODUCT: ProductDetails,
        }
    )


DEFAULT_REGISTRY = build_default_registry()
