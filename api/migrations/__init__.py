"""
Database migrations and seeds (`python -m migrations`).
"""
