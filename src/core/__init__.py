"""
Core domain models, pricing calculations, and contracts.

This module contains the foundational building blocks that are independent
of external systems (store backends, payment processing, etc.).
"""
