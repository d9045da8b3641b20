"""
Unit tests for the Legal Assistant service.

Test individual components in isolation:
- Retry executor (attempts, backoff law, predicate, presets)
- Gemini client and prompt builder
- FAQ matching
- Response parser and filtering service
- API dependencies and exception handlers
"""
