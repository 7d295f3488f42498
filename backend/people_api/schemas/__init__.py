"""Pydantic Schemas — request/response contracts for the HTTP boundary.

Invariants:
    - Wire names are camelCase (firstName); Python attributes are snake_case
"""
