"""Routes package initializer for the Splitbook API.

Blueprints are defined in sibling modules (health, auth, members, expenses, settle)
and registered from splitbook.create_app.
"""
