"""Polling directory watcher that reports file additions, deletions, modifications and moves."""

__version__ = "0.1.0"