from awpaki.parsers.json_body import parse_json_body

__all__ = ["parse_json_body"]
