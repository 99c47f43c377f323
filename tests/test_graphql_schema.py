"""Tests executing GraphQL operations directly against the schema."""
from book_catalog.api import schema
from book_catalog.api.types import BookType
from tests.factories import AWAKENING_ID, CITY_OF_GLASS_ID

BOOK_FIELDS = """
    id
    title
    description
    isbn
    publisher
    gender
    publishYear
    author { name nationality }
"""


def run(context, query, variables=None):
    return schema.execute_sync(query, variable_values=variables, context_value=context)


def test_schema_exposes_contract():
    sdl = schema.as_str()
    assert "getBooksCount: Int!" in sdl
    assert "getAllBooks: [Book]" in sdl
    assert "getBook(id: String = null): Book" in sdl
    assert "getAllBooksByAuthor(authorName: String = null): [Book]" in sdl
    assert "deleteBook(id: String!): Book" in sdl
    assert "author: Author!" in sdl
    assert "enum Gender" in sdl
    for value in ("NONE", "FICTION", "MISTERY", "FANTASY", "ROMANCE"):
        assert value in sdl


def test_get_books_count(context):
    result = run(context, "{ getBooksCount }")
    assert result.errors is None
    assert result.data == {"getBooksCount": 2}


def test_get_all_books(context):
    result = run(context, f"{{ getAllBooks {{ {BOOK_FIELDS} }} }}")
    books = result.data["getAllBooks"]
    assert [b["title"] for b in books] == ["The Awakening", "City of Glass"]
    assert books[1] == {
        "id": CITY_OF_GLASS_ID,
        "title": "City of Glass",
        "description": "Ciudad de cristal...",
        "isbn": "978-014009874552",
        "publisher": "Simon & Schuster",
        "gender": "FANTASY",
        "publishYear": 2009,
        "author": {"name": "Paul Auster", "nationality": "Estadounidense"},
    }


def test_get_book(context):
    query = "query ($id: String) { getBook(id: $id) { title author { name nationality } } }"

    result = run(context, query, {"id": AWAKENING_ID})
    assert result.data["getBook"] == {
        "title": "The Awakening",
        "author": {"name": "Kate Chopin", "nationality": None},
    }

    assert run(context, query, {"id": "missing"}).data == {"getBook": None}
    assert run(context, query, {"id": None}).data == {"getBook": None}


def test_get_all_books_by_author(context):
    query = "query ($name: String) { getAllBooksByAuthor(authorName: $name) { id } }"

    assert run(context, query, {"name": "Paul Auster"}).data == {
        "getAllBooksByAuthor": [{"id": CITY_OF_GLASS_ID}]
    }
    assert run(context, query, {"name": "Nobody"}).data == {"getAllBooksByAuthor": []}
    assert run(context, query, {"name": None}).data == {"getAllBooksByAuthor": []}


def test_add_book(context):
    mutation = """
        mutation {
            addBook(title: "Moon Palace", publisher: "Viking", gender: FICTION,
                    authorName: "Paul Auster", publishYear: 1989) {
                id title gender publishYear isbn author { name nationality }
            }
        }
    """
    result = run(context, mutation)

    assert result.errors is None
    book = result.data["addBook"]
    assert book["id"]
    assert book["id"] not in (AWAKENING_ID, CITY_OF_GLASS_ID)
    assert book["title"] == "Moon Palace"
    assert book["gender"] == "FICTION"
    assert book["publishYear"] == 1989
    assert book["isbn"] is None
    assert book["author"] == {"name": "Paul Auster", "nationality": None}
    assert context.service.count_books() == 3


def test_add_book_duplicate_title(context):
    mutation = """
        mutation {
            addBook(title: "City of Glass", publisher: "X", gender: FANTASY, authorName: "Y") { id }
        }
    """
    result = run(context, mutation)

    assert result.data == {"addBook": None}
    assert len(result.errors) == 1
    error = result.errors[0]
    assert error.message == "Title must be unique"
    assert error.extensions["code"] == "BAD_USER_INPUT"
    assert context.service.count_books() == 2


def test_add_book_requires_mandatory_arguments(context):
    result = run(context, 'mutation { addBook(title: "T", gender: NONE, authorName: "A") { id } }')
    assert result.errors
    assert context.service.count_books() == 2


def test_update_book_partial(context):
    mutation = """
        mutation ($id: String!) {
            updateBook(id: $id, publishYear: 1985, gender: MISTERY) {
                title description isbn publisher gender publishYear author { name nationality }
            }
        }
    """
    result = run(context, mutation, {"id": CITY_OF_GLASS_ID})

    assert result.data["updateBook"] == {
        "title": "City of Glass",
        "description": "Ciudad de cristal...",
        "isbn": "978-014009874552",
        "publisher": "Simon & Schuster",
        "gender": "MISTERY",
        "publishYear": 1985,
        "author": {"name": "Paul Auster", "nationality": "Estadounidense"},
    }


def test_update_book_explicit_null_clears_optional_field(context):
    mutation = """
        mutation ($id: String!) {
            updateBook(id: $id, isbn: null, title: null) { title isbn }
        }
    """
    result = run(context, mutation, {"id": CITY_OF_GLASS_ID})
    assert result.data["updateBook"] == {"title": "City of Glass", "isbn": None}


def test_update_book_empty_string_is_applied(context):
    mutation = 'mutation ($id: String!) { updateBook(id: $id, description: "") { description } }'
    result = run(context, mutation, {"id": AWAKENING_ID})
    assert result.data["updateBook"] == {"description": ""}


def test_update_book_unknown_id(context):
    result = run(context, 'mutation { updateBook(id: "missing", title: "X") { id } }')
    assert result.errors is None
    assert result.data == {"updateBook": None}


def test_delete_book(context):
    mutation = "mutation ($id: String!) { deleteBook(id: $id) { id title } }"

    result = run(context, mutation, {"id": AWAKENING_ID})
    assert result.data == {"deleteBook": {"id": AWAKENING_ID, "title": "The Awakening"}}
    assert run(context, "{ getBooksCount }").data == {"getBooksCount": 1}

    result = run(context, mutation, {"id": AWAKENING_ID})
    assert result.errors is None
    assert result.data == {"deleteBook": None}
    assert run(context, "{ getBooksCount }").data == {"getBooksCount": 1}


def test_book_author_comes_from_record_projection(service):
    book = service.get_book(CITY_OF_GLASS_ID)
    author = BookType.from_record(book).author
    assert (author.name, author.nationality) == (book.author.name, book.author.nationality)
