"""
Domain Layer - Pure Business Logic

This module contains the core domain logic with zero framework dependencies.
All business rules, entities, value objects, and domain services reside here.

Structure:
- entities/: Core business entities (Portfolio, Stock, Transaction, WatchlistItem)
- value_objects/: Immutable value objects (Money, Percentage, StockSymbol)
- services/: Domain services (PortfolioCalculationService, WatchlistService)
- exceptions.py: Domain-specific exceptions
"""
