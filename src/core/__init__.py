"""Core: configuration, argument parsing, domain and orchestration."""
