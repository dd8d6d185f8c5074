from riftdex.parsers.api_tcg import parse_card, parse_page

__all__ = [
    "parse_card",
    "parse_page",
]
