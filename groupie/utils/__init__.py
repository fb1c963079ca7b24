"""Shared utilities -- error hierarchy, logging, payload decoding."""
