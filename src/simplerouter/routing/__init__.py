"""Routing: ordered regular-expression routes, matched by linear scan.

Registration order is priority order. The first route whose pattern
matches the whole path under the request's method wins.
"""
