"""Features of neo-method-security."""
