# src/gcurrency/adapters/__init__.py
"""
Adapters Layer - External Integrations

This package contains adapters for external systems:
- Remote quote endpoints (providers)
"""
