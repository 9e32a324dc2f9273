"""Domain models and errors.

Pure data structures (Pydantic v2) and the error taxonomy. The domain does
not know about subprocesses, PATH lookups or the terminal.
"""
