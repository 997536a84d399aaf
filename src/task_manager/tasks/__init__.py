"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskInput)
- errors.py: ValidationError / NotFoundError / PersistenceError
- validation.py: request body rules, returns a list of violations
- task_store.py: SQLite-backed storage
- task_service.py: CRUD operations used by the HTTP layer
"""
