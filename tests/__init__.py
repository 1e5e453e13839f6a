"""Test package for the Dox drive API

Shared row builders and the test app factory live in tests.factories.
"""
