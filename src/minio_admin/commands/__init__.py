"""Command modules, discovered at start-up by minio_admin.main."""
