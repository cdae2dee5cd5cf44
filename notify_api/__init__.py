"""Notification delivery API package.

Ensures the local ``notify_api`` package is resolved as a regular package.
"""
