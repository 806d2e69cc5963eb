"""Browse Chamber of Deputies open data: roster, events, expenses, fronts,
expense ranking and linked-document extraction."""

__version__ = "1.0.0"
