import yaml

from post_api.schemas.post import Quote
from post_api.services.quotes_service import quotes_ref_for, serialize_quotes


def test_serialize_quotes_returns_empty_for_no_quotes():
    assert serialize_quotes("dune", []) == ""
    assert serialize_quotes("dune", None) == ""


def test_serialize_quotes_preserves_order_and_fields():
    quotes = [
        Quote(
            text="Fear is the mind-killer.",
            quoteAuthor="Paul",
            tags=["fear", "litany", "courage"],
            quoteSource="Chapter 1",
        ),
        Quote(text="The spice must flow."),
    ]

    doc = serialize_quotes("dune-notes", quotes)
    data = yaml.safe_load(doc)

    assert list(data) == ["bookSlug", "quotes"]
    assert data["bookSlug"] == "dune-notes"
    assert data["quotes"] == [
        {
            "text": "Fear is the mind-killer.",
            "quoteAuthor": "Paul",
            "tags": ["fear", "litany", "courage"],
            "quoteSource": "Chapter 1",
        },
        {"text": "The spice must flow."},
    ]


def test_serialize_quotes_keeps_unicode_readable():
    doc = serialize_quotes("notes", [Quote(text="Ça va, «mon ami»")])

    assert "Ça va, «mon ami»" in doc


def test_quotes_ref_for():
    assert quotes_ref_for("dune-notes") == "dune-notes-quotes"
