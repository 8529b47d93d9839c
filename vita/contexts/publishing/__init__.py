"""
Publishing Context

Responsibilities:
- Wraps non-empty profile records in meta/data envelopes
- Writes one JSON file per endpoint plus the root.json directory
- Resolves endpoint lookups against a published directory (200 / 404 shapes)

Owns: Output file layout, envelope format, local endpoint lookup
Never: Parses template text or changes record contents
"""

from vita.contexts.publishing.endpoint_registry import EndpointRegistry
from vita.contexts.publishing.endpoint_writer import (
    PublishResult,
    build_profile,
    write_endpoint_files,
)
from vita.contexts.publishing.exceptions import EndpointNotFoundError

__all__ = [
    "build_profile",
    "write_endpoint_files",
    "PublishResult",
    "EndpointRegistry",
    "EndpointNotFoundError",
]
