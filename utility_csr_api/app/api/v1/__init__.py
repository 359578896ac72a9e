"""
Version 1 of the API.

Breaking changes to tool payloads should go into a new version
subpackage so that deployed voice agents keep working.
"""
