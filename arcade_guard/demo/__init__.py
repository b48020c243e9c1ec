"""Runnable kiosk demo."""
