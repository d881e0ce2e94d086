"""
Reusable decoders for ParameterConfig.decoder.
"""

from awpaki.decoders.decoders import (
    alphanumeric_id,
    create_enum,
    enum_of,
    iso_date_string,
    json_string,
    limited_integer,
    optional_integer,
    optional_trimmed_string,
    positive_integer,
    string_array,
    string_to_boolean,
    trimmed_lower_string,
    trimmed_string,
    url_encoded_json,
    valid_email,
)

__all__ = [
    "alphanumeric_id",
    "create_enum",
    "enum_of",
    "iso_date_string",
    "json_string",
    "limited_integer",
    "optional_integer",
    "optional_trimmed_string",
    "positive_integer",
    "string_array",
    "string_to_boolean",
    "trimmed_lower_string",
    "trimmed_string",
    "url_encoded_json",
    "valid_email",
]
