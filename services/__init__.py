"""
services/ - Integration Layer
==============================
Record builders and the CleverTap upload client.
"""
