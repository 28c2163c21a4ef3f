"""
Integration tests for the Carrier Sales API.

Test the FastAPI app end to end with TestClient:
- Every route with a fixture catalog injected via dependency_overrides
- API key enforcement
- Error envelopes (400, 401, 404, 500, 502)
"""
