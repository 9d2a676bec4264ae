"""Domain models and entities.

Why:
- Strict, pure data structures (Pydantic v2) live here.
- The domain knows nothing about httpx or the CLI: only the API's concepts.
"""
