"""Service layer — wraps domain operations in ServiceResult."""
