"""Service layer returning ServiceResult for every operation."""
