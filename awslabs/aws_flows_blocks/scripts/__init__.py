"""Maintenance scripts for the AWS Flows blocks catalog."""
