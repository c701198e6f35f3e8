"""
Catalog package for the book catalogue API.

This package holds the book schemas (``schemas``), the seed data with
its search helpers (``store``) and the ``/books`` routes (``router``).
Account routes (``/register``, ``/login``) live in ``main`` next to
the application factory.
"""
