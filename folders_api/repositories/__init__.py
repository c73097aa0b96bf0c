"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for users and groups, apps, and
folders. Visibility rules are expressed as SQL predicates here so that every
service call site shares the same query.
"""
