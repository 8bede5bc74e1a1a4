"""Inventory system connectors."""
