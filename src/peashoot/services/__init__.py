"""Service layer: catalog and location operations returning ServiceResult."""
