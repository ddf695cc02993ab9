"""Domain models and value types.

Pure data structures only (enums, pydantic v2 models, error types). The
domain knows nothing about the CLI, files or configuration.
"""
