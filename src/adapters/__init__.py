"""Adapters that talk to the operating system (subprocesses)."""
