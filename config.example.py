# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
In the cluster the variables come from the ConfigMap in k8s/base plus the overlay patches.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_MANAGER_APP_NAME": "App display name (default: task-manager).",
    "TASK_MANAGER_LOG_LEVEL": "Console logging level (default: INFO; dev overlay uses DEBUG).",
    "TASK_MANAGER_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/task_manager.log.",
    # Paths (gitignored locally, a volume in the cluster)
    "TASK_MANAGER_DATA_DIR": "Local data directory (default: .local/task_manager).",
    "TASK_MANAGER_DB_PATH": "SQLite database path (default: <data_dir>/tasks.sqlite3).",
    # HTTP
    "TASK_MANAGER_HOST": "Bind address (default: 0.0.0.0).",
    "TASK_MANAGER_PORT": "Listen port (default: 8080).",
    "TASK_MANAGER_CORS_ORIGINS": "Comma/space separated origins allowed on /api/* (default: *).",
    "TASK_MANAGER_DEBUG": "Run Flask in debug mode (true/false, never in prod).",
}
