"""
csvjson – CSV-to-JSON ingest converter and synthetic account-data seeder.
"""
