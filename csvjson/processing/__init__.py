"""
File processing entry points for the CSV ingest pipeline.
"""
