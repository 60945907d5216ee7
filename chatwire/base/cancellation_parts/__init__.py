"""Cancellation parts package; import from ``chatwire.base.cancellation``."""
