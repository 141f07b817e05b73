"""Campus Connect package.

This package is organized by feature modules (users, events, practice,
attendance, notifications, ...) with a thin Flask controller layer and
service/repository layers on top of a JSON document store.
"""
