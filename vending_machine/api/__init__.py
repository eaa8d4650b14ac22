"""
API layer for the vending machine service.

Exposes the HTTP endpoints for login, users, deposits, purchases and the
product catalog.
"""
