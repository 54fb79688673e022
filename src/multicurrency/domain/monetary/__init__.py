"""Monetary domain package.

Contains `Money`, a value that is either a single `Decimal` amount in one currency or a
flat sum of such amounts in several currencies, plus a ready-made ordered `Currency`
identifier and a registry of common currencies.
"""
