"""Core interfaces.

Protocols implemented by the adapters so the task runner depends on
abstractions and can be exercised with fakes.
"""
