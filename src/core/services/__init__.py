"""Services that orchestrate the domain through the core interfaces."""
