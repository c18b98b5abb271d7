"""
Shared utilities: file path helpers, result values and logging setup.
"""
