"""Runtime configuration for the tax calculator."""
