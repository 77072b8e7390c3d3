from .loader import load_case, parse_document

__all__ = ["load_case", "parse_document"]
