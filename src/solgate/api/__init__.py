"""API module for Solgate.

API layer:
- Decodes request bodies, delegates to commands, wraps results
- Returns the uniform success / error envelope
- Forbidden: direct SDK calls, field decoding logic
"""
