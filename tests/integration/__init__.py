"""
Integration tests for the Legal Assistant service.

Test components together through the FastAPI app:
- API endpoints (TestClient, LLM client replaced via dependency overrides)
- Retry around the filtering call, FAQ precedence, HTTP error mapping
"""
