"""Storefront catalog service.

Category tree navigation and facet filtering over a remote
storefront GraphQL API.
"""
