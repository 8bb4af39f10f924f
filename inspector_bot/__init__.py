"""Telegram bot that answers GitHub repository search commands."""

__version__ = "0.1.0"
