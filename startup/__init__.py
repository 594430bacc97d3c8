"""Startup orchestration package.

Provides small, testable units for app initialization:
- db_init: engine configuration and table creation
- orchestrator: coordinates the startup phases
"""


def run_startup_tasks(config=None) -> dict:
    """Run all startup tasks."""
    # Lazy import to avoid import-time graph issues
    from startup.orchestrator import run_startup_tasks as _run

    return _run(config)
