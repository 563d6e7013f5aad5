"""Core backend infrastructure for the obstacle priority engine.

Configuration, logging, database, auth actor and dependency helpers used by
the FastAPI application entrypoint and the CLI tools.
"""
