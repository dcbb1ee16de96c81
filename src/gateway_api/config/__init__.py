"""
Configuration management for the gateway.

Contains the Pydantic settings object that is read once per process and shared
by the credential loader, the vendor adapters and the request handlers.
"""
