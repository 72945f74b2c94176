"""Rich and JSON output for ServiceResult."""
