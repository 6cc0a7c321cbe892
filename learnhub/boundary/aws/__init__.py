"""
AWS boundary modules.

Exports: S3ArtifactStorage
"""

from .s3_client import S3ArtifactStorage

__all__ = ["S3ArtifactStorage"]
