"""
High-level use cases for the feedback API.

Service modules apply the business rules (validation, normalisation) and call
the store; routers call services instead of mutating the collection directly.
"""
