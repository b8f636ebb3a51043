"""Core functionality for the AWS Flows blocks catalog."""

from . import aws, catalog, common

__all__ = ['aws', 'catalog', 'common']
