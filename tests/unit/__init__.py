"""
Unit tests for the Carrier Sales API.

Test individual components in isolation:
- Load loader and catalog (lookup, search predicates, degradation)
- Carrier registries (static allow-list, FMCSA over httpx.MockTransport)
- Carrier verifier (input validation)
- Call classifier (rule order, lexicon, seeded duration)
- Metrics sources
- API dependencies and security helpers
"""
