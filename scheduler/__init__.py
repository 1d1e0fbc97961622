"""Scheduled jobs that feed the CyberFit store."""
