"""
Vending Machine Service root package.

This package contains the FastAPI app entry point (main.py), API routes,
the purchase/deposit domain logic, and the MongoDB infrastructure.
"""
