"""
miniblog: a small GraphQL API over an in-memory collection of blog posts
"""

__version__ = "0.1.0"
