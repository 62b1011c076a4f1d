# backend/notihub/__init__.py
"""
Notihub notification system package.

This package contains:
- main: FastAPI application factory
- demo: the fixed Alice / Bob driver sequence
- notifications: subscribers, senders, factory and the NotificationManager
- utils: environment helpers
"""
