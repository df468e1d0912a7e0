"""
Models Package

A package containing data models for the application.
"""

from .models import NewPost, Post

__all__ = ["NewPost", "Post"]
