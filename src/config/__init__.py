"""
Configuration loading and validation.

Provides the strongly typed Settings object loaded from environment variables
(and an optional .env file) with upfront validation.
"""
