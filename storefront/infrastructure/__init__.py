"""Infrastructure module.

Configuration, logging setup and the storefront GraphQL client.
"""
