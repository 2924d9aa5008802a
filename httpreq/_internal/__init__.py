"""Internal modules for httpreq.

These are not intended for direct use in application code.

Modules:
    body - Body sources and resolution
    http - Transport and client construction
    query - Query-string encoding
    validation - Method and path-parameter checks
"""
