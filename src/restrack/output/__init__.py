"""Output formatting for ServiceResult (Rich, JSON, quiet)."""
