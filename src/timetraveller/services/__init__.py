"""Service layer — wraps the conversion API in the ServiceResult contract."""
