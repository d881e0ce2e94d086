from awpaki.extractors.event_params import (
    EventSchema,
    ParameterConfig,
    ParameterType,
    extract_event_params,
    resolve_path,
)

__all__ = [
    "EventSchema",
    "ParameterConfig",
    "ParameterType",
    "extract_event_params",
    "resolve_path",
]
