"""WebAudit: single-page website quality auditor with competitor comparison."""

__version__ = "1.0.0"
