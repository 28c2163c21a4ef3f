"""
Carrier Sales API for inbound freight carrier calls.

Serves the pieces an inbound sales agent needs during a carrier call:
- Load catalog (list, lookup, multi-criteria search)
- Carrier verification by MC number (static allow-list or FMCSA registry)
- Heuristic call outcome and sentiment classification
- Call metrics snapshot and a polling dashboard

Architecture: FastAPI app + injectable registry/metrics backends + structlog
"""

__version__ = "1.0.0"
