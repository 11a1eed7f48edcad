"""
Squares web service package

This package contains the FastAPI application, routers, services, templates, and static assets
for a small service that lays out colored squares on an expanding spiral grid and keeps them
in a JSON file between restarts.
"""
