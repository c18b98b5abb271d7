"""
Data I/O: CSV ingest, delimited file content building and record schemas.

Handles turning raw CSV bytes into records and serializing records back
into delimited text.
"""
