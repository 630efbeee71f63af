from stylekit.parser.errors import ParseError
from stylekit.parser.header import header_from_identifier, parse_header_literal
from stylekit.parser.transformer import parse_style, parse_styles

__all__ = [
    "ParseError",
    "parse_style",
    "parse_styles",
    "parse_header_literal",
    "header_from_identifier",
]
