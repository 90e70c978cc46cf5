# ABOUTME: Host-shaped metadata records exchanged with the media server.
# ABOUTME: BookInfo is the lookup input; Book, MetadataResult, and RemoteSearchResult are outputs.

from dataclasses import dataclass, field


@dataclass
class BookInfo:
    """Lookup input derived from a book file and its folder.

    `name` is the raw, file-name-derived title. The remaining fields may be
    pre-filled by the caller (e.g. a series name taken from the parent folder)
    and are refined by the file name parser.
    """

    name: str = ""
    series_name: str | None = None
    index_number: int | None = None
    year: int | None = None
    provider_ids: dict[str, str] = field(default_factory=dict)

    def get_provider_id(self, key: str) -> str | None:
        """Return the identifier stored under `key`, or None if missing or blank."""
        value = self.provider_ids.get(key)
        if value is None or not value.strip():
            return None
        return value


@dataclass
class Book:
    """Metadata entity handed back to the host for a single book."""

    name: str | None = None
    overview: str | None = None
    production_year: int | None = None
    studios: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    community_rating: float | None = None
    provider_ids: dict[str, str] = field(default_factory=dict)

    def add_studio(self, name: str) -> None:
        if name not in self.studios:
            self.studios.append(name)

    def add_genre(self, name: str) -> None:
        if name not in self.genres:
            self.genres.append(name)

    def add_tag(self, name: str) -> None:
        if name not in self.tags:
            self.tags.append(name)

    def set_provider_id(self, key: str, value: str) -> None:
        self.provider_ids[key] = value


@dataclass
class PersonInfo:
    """A person credited on a book (author, illustrator, ...)."""

    name: str
    type: str


@dataclass
class MetadataResult:
    """Outcome of a metadata lookup.

    `has_metadata` is False when nothing usable was found; `item` is then None.
    `queried_by_id` records whether the lookup started from a known provider id.
    """

    item: Book | None = None
    people: list[PersonInfo] = field(default_factory=list)
    has_metadata: bool = False
    queried_by_id: bool = False
    result_language: str | None = None

    def add_person(self, person: PersonInfo) -> None:
        self.people.append(person)


@dataclass
class RemoteSearchResult:
    """Summary of one remote search candidate, shown to the user for manual selection."""

    name: str | None = None
    overview: str | None = None
    production_year: int | None = None
    image_url: str | None = None
    search_provider_name: str = ""
    provider_ids: dict[str, str] = field(default_factory=dict)

    def set_provider_id(self, key: str, value: str) -> None:
        self.provider_ids[key] = value
