"""Search index derivation."""


def build_search_index(name: str) -> str:
    """Lowercase the name and collapse runs of whitespace to single spaces."""
    return ' '.join(name.lower().split())
