"""
Application layer package.

Blog use cases: one class per operation, each exposing `execute`.
Use cases receive the narrow port they need plus the container, and
let storage errors propagate untouched to the HTTP layer.
"""
