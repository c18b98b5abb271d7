"""
Configuration loading and validation for ingest and seeding settings.

Provides strongly typed settings objects loaded from environment variables
with upfront validation.
"""
