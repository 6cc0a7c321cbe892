"""
Boundary layer for external system integrations.

Handles interactions with external systems (the relational database and S3).
Provides adapters and clients for infrastructure dependencies.
"""
