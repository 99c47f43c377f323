"""Sample records loaded into the catalog on startup."""
from book_catalog.schemas import Book, Gender

SEED_BOOKS: tuple[Book, ...] = (
    Book(
        id="81529139-7370-4c9e-870d-8b4947897498",
        title="The Awakening",
        description="The Awakening es una novela...",
        publisher="W W Norton & Co Inc",
        gender=Gender.NONE,
        publish_year=1899,
        author_name="Kate Chopin",
    ),
    Book(
        id="064d51b1-76a0-4ffe-995b-2f37ee4448ec",
        title="City of Glass",
        description="Ciudad de cristal...",
        isbn="978-014009874552",
        publisher="Simon & Schuster",
        gender=Gender.FANTASY,
        publish_year=2009,
        author_name="Paul Auster",
        author_nationality="Estadounidense",
    ),
)
