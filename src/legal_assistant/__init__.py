"""
Legal Assistant service for the law firm consultation site.

Receives legal questions from the website and returns an orientative answer:
- Legal category detection with a generative model (Gemini)
- Local FAQ matching for canned answers
- Retry with exponential backoff around the AI calls

Architecture: FastAPI service + Gemini REST client + local FAQ table
"""

__version__ = "1.0.0"
