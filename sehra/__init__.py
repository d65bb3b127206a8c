"""Sehra wedding planning platform: HTTP/realtime API and client core."""
