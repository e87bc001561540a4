"""
API Package

FastAPI application exposing the bot contact list.
"""
