"""Details schemas, one per content type.

Each model validates the type-specific ``details`` sub-document of a
CanonicalItem. Fields declare whether they are required, their default
when absent, and the legal values of closed domains. Unknown keys are
kept as-is: providers routinely send more than the schema names.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = int | float


class DetailsModel(BaseModel):
    """Base for details schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


# =============================================================================
# Shared building blocks
# =============================================================================


class Range(DetailsModel):
    min: Number | None = None
    max: Number | None = None


class Dimensions(DetailsModel):
    """Assembled product dimensions in cm."""

    height: Number | None = None
    width: Number | None = None
    depth: Number | None = None


class AverageRating(DetailsModel):
    average: Number | None = None
    count: int | None = None


class Money(DetailsModel):
    amount: Number
    currency: str


# =============================================================================
# CONSTRUCT_TOY - LEGO, Playmobil, Mega Construx, ...
# =============================================================================

ToyAvailability = Literal[
    "available", "retired", "coming_soon", "out_of_stock", "exclusive", "unknown"
]


class InstructionManual(DetailsModel):
    id: str | None = None
    description: str | None = None
    pdf_url: str
    sequence: int | None = None


class Instructions(DetailsModel):
    count: int = 0
    manuals: list[InstructionManual] = Field(default_factory=list)
    url: str | None = None


class Barcodes(DetailsModel):
    upc: str | None = None
    ean: str | None = None


class ConstructToyDetails(DetailsModel):
    # Brand and classification
    brand: str
    theme: str | None = None
    subtheme: str | None = None
    category: str | None = None

    # Product specifications
    set_number: str | None = None
    piece_count: int | None = None
    minifig_count: int | None = None

    age_range: Range | None = None
    dimensions: Dimensions | None = None
    price: Money | None = None

    # Availability and dates (ISO strings)
    availability: ToyAvailability = "unknown"
    release_date: str | None = None
    retirement_date: str | None = None

    instructions_url: str | None = None
    instructions: Instructions | None = None
    barcodes: Barcodes | None = None
    rating: AverageRating | None = None
    videos: list[str] = Field(default_factory=list)


# =============================================================================
# BOOK - books, comics, manga volumes
# =============================================================================

BookFormat = Literal[
    "hardcover", "paperback", "ebook", "audiobook", "comic", "manga", "graphic_novel", "unknown"
]


class BookSeries(DetailsModel):
    name: str
    volume: Number | None = None
    total_volumes: int | None = None


class BookDetails(DetailsModel):
    authors: list[str] = Field(default_factory=list)
    illustrators: list[str] = Field(default_factory=list)
    translators: list[str] = Field(default_factory=list)

    publisher: str | None = None
    imprint: str | None = None
    edition: str | None = None

    isbn10: str | None = None
    isbn13: str | None = None
    asin: str | None = None

    format: BookFormat = "unknown"
    page_count: int | None = None

    language: str | None = None
    original_language: str | None = None

    genres: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    series: BookSeries | None = None
    publication_date: str | None = None
    original_publication_date: str | None = None
    rating: AverageRating | None = None


# =============================================================================
# VIDEOGAME
# =============================================================================


class GameRating(DetailsModel):
    metacritic: Number | None = None
    user_score: Number | None = None
    count: int | None = None


class Multiplayer(DetailsModel):
    local: bool | None = None
    online: bool | None = None
    max_players: int | None = None


class VideogameDetails(DetailsModel):
    developers: list[str] = Field(default_factory=list)
    publishers: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    release_date: str | None = None
    release_dates: dict[str, str] | None = None

    esrb: str | None = None
    pegi: int | None = None

    rating: GameRating | None = None
    multiplayer: Multiplayer | None = None

    dlc: list[str] = Field(default_factory=list)
    edition: str | None = None


# =============================================================================
# MOVIE / SERIES
# =============================================================================


class CastMember(DetailsModel):
    name: str
    character: str | None = None
    order: int | None = None


class MovieRating(DetailsModel):
    imdb: Number | None = None
    tmdb: Number | None = None
    rotten_tomatoes: Number | None = None
    vote_count: int | None = None


class MovieCollection(DetailsModel):
    name: str
    part: int | None = None


class MovieDetails(DetailsModel):
    directors: list[str] = Field(default_factory=list)
    writers: list[str] = Field(default_factory=list)
    cast: list[CastMember] = Field(default_factory=list)

    studios: list[str] = Field(default_factory=list)
    production_countries: list[str] = Field(default_factory=list)
    budget: Number | None = None
    revenue: Number | None = None

    genres: list[str] = Field(default_factory=list)
    runtime: int | None = None

    original_language: str | None = None
    spoken_languages: list[str] = Field(default_factory=list)

    release_date: str | None = None
    theatrical_release: str | None = None
    digital_release: str | None = None

    rating: MovieRating | None = None
    certification: str | None = None
    collection: MovieCollection | None = None


SeriesStatus = Literal["returning", "ended", "canceled", "in_production", "planned", "unknown"]


class SeriesRating(DetailsModel):
    imdb: Number | None = None
    tmdb: Number | None = None
    vote_count: int | None = None


class SeriesDetails(DetailsModel):
    creators: list[str] = Field(default_factory=list)
    cast: list[CastMember] = Field(default_factory=list)

    networks: list[str] = Field(default_factory=list)
    studios: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)

    season_count: int | None = None
    episode_count: int | None = None
    episode_runtime: int | None = None

    status: SeriesStatus = "unknown"

    first_air_date: str | None = None
    last_air_date: str | None = None
    next_episode_date: str | None = None

    original_language: str | None = None
    rating: SeriesRating | None = None


# =============================================================================
# ANIME / MANGA
# =============================================================================

AnimeMediaType = Literal["tv", "movie", "ova", "ona", "special", "music", "unknown"]
AnimeStatus = Literal["airing", "finished", "upcoming", "unknown"]
AnimeSource = Literal[
    "manga", "light_novel", "visual_novel", "game", "original", "web_manga", "other", "unknown"
]


class AnimeRating(DetailsModel):
    mal: Number | None = None
    anilist: Number | None = None
    count: int | None = None


class AnimeDetails(DetailsModel):
    media_type: AnimeMediaType

    studios: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)
    demographics: list[str] = Field(default_factory=list)

    episode_count: int | None = None
    episode_duration: int | None = None

    status: AnimeStatus = "unknown"

    aired_from: str | None = None
    aired_to: str | None = None
    season: str | None = None

    source: AnimeSource = "unknown"
    rating: AnimeRating | None = None
    age_rating: str | None = None


MangaMediaType = Literal[
    "manga", "light_novel", "manhwa", "manhua", "one_shot", "doujinshi", "unknown"
]
MangaStatus = Literal["publishing", "finished", "hiatus", "discontinued", "upcoming", "unknown"]


class MangaAuthor(DetailsModel):
    name: str
    role: Literal["author", "artist", "both"] = "both"


class MangaDetails(DetailsModel):
    media_type: MangaMediaType

    authors: list[MangaAuthor] = Field(default_factory=list)
    serialization: str | None = None

    genres: list[str] = Field(default_factory=list)
    themes: list[str] = Field(default_factory=list)
    demographics: list[str] = Field(default_factory=list)

    volume_count: int | None = None
    chapter_count: int | None = None

    status: MangaStatus = "unknown"

    published_from: str | None = None
    published_to: str | None = None
    rating: AnimeRating | None = None


# =============================================================================
# TCG_CARD - Pokemon, Magic, Yu-Gi-Oh, ...
# =============================================================================

Legality = Literal["legal", "banned", "restricted", "not_legal"]


class CardSet(DetailsModel):
    name: str
    code: str | None = None
    series: str | None = None
    release_date: str | None = None


class CardPrices(DetailsModel):
    market: Number | None = None
    low: Number | None = None
    mid: Number | None = None
    high: Number | None = None
    currency: str = "USD"
    last_updated: str | None = None


class TcgCardDetails(DetailsModel):
    game: str
    set: CardSet

    number: str | None = None
    total_in_set: int | None = None

    rarity: str | None = None
    finish: list[str] = Field(default_factory=list)

    attributes: dict[str, Any] | None = None
    artist: str | None = None
    prices: CardPrices | None = None
    legality: dict[str, Legality] | None = None


# =============================================================================
# BOARD_GAME
# =============================================================================


class PlayerCount(DetailsModel):
    min: int | None = None
    max: int | None = None
    recommended: int | None = None


class BoardGameRating(DetailsModel):
    bgg: Number | None = None
    count: int | None = None
    rank: int | None = None


class BoardGameDetails(DetailsModel):
    designers: list[str] = Field(default_factory=list)
    artists: list[str] = Field(default_factory=list)
    publishers: list[str] = Field(default_factory=list)

    players: PlayerCount | None = None
    playing_time: Range | None = None

    min_age: int | None = None
    complexity: Number | None = Field(None, ge=0, le=5)

    categories: list[str] = Field(default_factory=list)
    mechanics: list[str] = Field(default_factory=list)

    rating: BoardGameRating | None = None

    is_expansion: bool = False
    base_game: str | None = None
    expansions: list[str] = Field(default_factory=list)


# =============================================================================
# MUSIC - albums and releases
# =============================================================================

MusicMediaType = Literal["album", "single", "ep", "compilation", "soundtrack", "unknown"]


class MusicArtist(DetailsModel):
    name: str
    role: str | None = None


class Track(DetailsModel):
    position: int
    title: str
    duration: int | None = None


class MusicDetails(DetailsModel):
    media_type: MusicMediaType

    artists: list[MusicArtist] = Field(default_factory=list)
    label: str | None = None

    genres: list[str] = Field(default_factory=list)
    styles: list[str] = Field(default_factory=list)

    track_count: int | None = None
    total_duration: int | None = None
    tracks: list[Track] | None = None

    barcode: str | None = None
    catalog_number: str | None = None

    release_date: str | None = None
    rating: AverageRating | None = None


# =============================================================================
# COLLECTIBLE - figures, statues, replicas
# =============================================================================

CollectibleAvailability = Literal[
    "available", "preorder", "sold_out", "exclusive", "discontinued", "unknown"
]


class Msrp(DetailsModel):
    msrp: Number | None = None
    currency: str = "USD"


class CollectibleDetails(DetailsModel):
    category: str

    manufacturer: str | None = None
    brand: str | None = None
    series: str | None = None

    franchise: str | None = None
    character: str | None = None

    scale: str | None = None
    material: list[str] = Field(default_factory=list)
    dimensions: Dimensions | None = None

    edition: str | None = None
    limited_to: int | None = None

    price: Msrp | None = None
    availability: CollectibleAvailability = "unknown"
    release_date: str | None = None


# =============================================================================
# PRODUCT - generic e-commerce listings
# =============================================================================

ProductAvailability = Literal["in_stock", "out_of_stock", "preorder", "unknown"]
ProductCondition = Literal["new", "like_new", "very_good", "good", "acceptable", "unknown"]


class ProductPrice(DetailsModel):
    current: Number
    original: Number | None = None
    currency: str = "EUR"


class Shipping(DetailsModel):
    price: Number | None = None
    free_above: Number | None = None
    estimated_days: int | None = None


class ProductVariant(DetailsModel):
    name: str
    options: list[str] = Field(default_factory=list)


class ProductDetails(DetailsModel):
    brand: str | None = None
    seller: str | None = None
    categories: list[str] = Field(default_factory=list)

    price: ProductPrice

    availability: ProductAvailability = "unknown"
    stock: int | None = None
    condition: ProductCondition = "unknown"

    shipping: Shipping | None = None
    rating: AverageRating | None = None
    variants: list[ProductVariant] | None = None
