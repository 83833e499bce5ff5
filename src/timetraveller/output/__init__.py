"""Output formatting for ServiceResult (Rich for humans, JSON for machines)."""
