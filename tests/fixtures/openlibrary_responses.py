# ABOUTME: Canned Open Library Books API response fixtures for testing.
# ABOUTME: Provides realistic JSON dicts keyed by "ISBN:<value>" as jscmd=data returns them.

BOOKS_RESPONSE = {
    "ISBN:0306406152": {
        "url": "https://openlibrary.org/books/OL7553203M/Fundamentals_of_physics",
        "key": "/books/OL7553203M",
        "title": "Fundamentals of Physics",
        "authors": [
            {"url": "https://openlibrary.org/authors/OL1A", "name": "David Halliday"},
            {"url": "https://openlibrary.org/authors/OL2A", "name": "Robert Resnick"},
        ],
        "number_of_pages": 1136,
        "publishers": [{"name": "Wiley"}, {"name": "Wiley India"}],
        "publish_date": "June 1, 1988",
        "subjects": [
            {"name": "Physics", "url": "https://openlibrary.org/subjects/physics"},
            {"name": "Textbooks", "url": "https://openlibrary.org/subjects/textbooks"},
        ],
        "excerpts": [{"text": "Physics is the study of matter.", "comment": ""}],
        "cover": {
            "small": "https://covers.openlibrary.org/b/id/240726-S.jpg",
            "medium": "http://covers.openlibrary.org/b/id/240726-M.jpg",
        },
    }
}

BOOKS_RESPONSE_MINIMAL = {
    "ISBN:0306406152": {
        "title": "Fundamentals of Physics",
    }
}

BOOKS_RESPONSE_EMPTY: dict = {}
