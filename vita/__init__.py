"""
VITA - Versioned Interface for Talent Attributes

Turns a hand-edited profile template (TEMPLATE.md) into structured JSON
records that can be served as a read-only "living resume" API.

Architecture:
- Collection Context: Template scaffolding (blank or pre-filled TEMPLATE.md)
- Parsing Context: Tolerant template parsing into typed profile records
- Publishing Context: Endpoint envelopes, directory file and local lookup
"""

__version__ = "0.1.0"
