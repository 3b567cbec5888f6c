"""
Pydantic schemas for API responses.

All FastAPI endpoints MUST use strict Pydantic models with explicit types.
"""
