"""Interfaces (application boundary) for WoofAreYou.

Defines the contracts shared by the service layer and adapters: most
importantly the abstract `Model` every command handler operates against.
Business rules stay out of this package.
"""
