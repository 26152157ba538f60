"""
MinIO Admin - account lifecycle administration for MinIO clusters.

Creates, inspects, edits, enables, disables and removes users' service
accounts, and enables or disables users, on a MinIO server reachable
through a configured alias.
"""

__version__ = "0.1.0"
