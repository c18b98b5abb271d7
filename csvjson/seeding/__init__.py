"""
Synthetic account-data generation and the seed file pipeline.
"""
