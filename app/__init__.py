"""Organizer messaging service: broadcast notifications and admin messages."""
