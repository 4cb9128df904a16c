# ABOUTME: Core catalog data structures: Book records, form data, and fixed enumerations.
# ABOUTME: Book is the persisted entity; BookFormData is the editable subset supplied by callers.

from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum


class _InputEnum(str, Enum):
    """Enum whose members can be resolved from loosely-typed user input."""

    @classmethod
    def from_input(cls, text: str) -> "_InputEnum":
        """Resolve a member by exact value or by name (case-insensitive).

        Hyphens and spaces in the input are treated as underscores, so
        "non-fiction", "Non Fiction" and "NON_FICTION" all resolve.

        Raises:
            ValueError: If no member matches.
        """
        try:
            return cls(text)
        except ValueError:
            pass
        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"'{text}' is not a valid {cls.__name__}") from None

    def __str__(self) -> str:
        return self.value


class BookLanguage(_InputEnum):
    PORTUGUESE = "Português"
    ENGLISH = "Inglês"
    SPANISH = "Espanhol"
    FRENCH = "Francês"
    GERMAN = "Alemão"
    ITALIAN = "Italiano"
    JAPANESE = "Japonês"
    CHINESE = "Chinês"
    RUSSIAN = "Russo"
    ARABIC = "Árabe"
    OTHER = "Outro"


class BookCategory(_InputEnum):
    FICTION = "Ficção"
    NON_FICTION = "Não-Ficção"
    SCIENCE = "Ciência"
    TECHNOLOGY = "Tecnologia"
    HISTORY = "História"
    PHILOSOPHY = "Filosofia"
    ARTS = "Artes"
    BIOGRAPHY = "Biografia"
    BUSINESS = "Negócios"
    COOKING = "Culinária"
    HEALTH = "Saúde"
    TRAVEL = "Viagens"
    RELIGION = "Religião"
    SELF_HELP = "Autoajuda"
    REFERENCE = "Referência"
    COMICS = "Quadrinhos & Novels Gráficas"
    CHILDREN = "Livros Infantis"
    EDUCATION = "Educação & Ensino"
    SPORTS = "Esportes & Atividades ao Ar Livre"
    OTHER = "Outro"


class SearchCriterion(_InputEnum):
    """The field a search query is matched against."""

    CATALOG_CODE = "catalogCode"
    TITLE = "title"
    SUBJECTS = "subjects"
    LANGUAGE = "language"


DEFAULT_CRITERION = SearchCriterion.TITLE


@dataclass
class BookFormData:
    """The editable fields of a book, as supplied when creating or updating.

    Values are assumed to have been validated already (see
    libris.catalog.validation); nothing here re-checks them.
    """

    title: str
    authors: list[str] = field(default_factory=list)
    publisher: str = ""
    edition: str = ""
    year: str = ""
    location: str = ""
    isbn: str = ""
    language: BookLanguage = BookLanguage.PORTUGUESE
    category: BookCategory = BookCategory.OTHER
    subjects: list[str] = field(default_factory=list)
    review: str = ""


# Field names shared by BookFormData and Book, in declaration order.
FORM_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(BookFormData))


@dataclass
class Book:
    """A cataloged book: form data plus identity and timestamps.

    ``id`` and ``catalog_code`` are assigned once at creation and never
    change. ``created_at`` is set once; ``updated_at`` moves forward on
    every update and is never earlier than ``created_at``.
    """

    id: str
    catalog_code: str
    title: str
    authors: list[str]
    publisher: str
    edition: str
    year: str
    location: str
    isbn: str
    language: BookLanguage
    category: BookCategory
    subjects: list[str]
    review: str
    created_at: datetime
    updated_at: datetime

    @property
    def author(self) -> str:
        """Convenience property: joined author string for display."""
        return ", ".join(self.authors) if self.authors else ""

    def form_data(self) -> BookFormData:
        """Extract the editable fields as a BookFormData."""
        return BookFormData(
            **{name: _copy_value(getattr(self, name)) for name in FORM_FIELDS}
        )


def _copy_value(value: object) -> object:
    return list(value) if isinstance(value, list) else value
