"""Groupie Tracker -- artist listing and detail pages over the Groupie Trackers API."""

__version__ = "0.1.0"
