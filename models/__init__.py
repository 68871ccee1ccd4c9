"""
models/ - Domain Models
========================
CleverTap record shapes and the batch envelope.
"""
