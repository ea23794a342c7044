"""
Test suite for contact-domain

Contains:
- tests/unit/          : Unit tests for individual modules
"""
