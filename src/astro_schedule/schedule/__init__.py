"""
Schedule subsystem.

Components:
- task_models.py: Task dataclass, factory and strict time validation
- event_bus.py: synchronous subscriber registry + console notifier
- interval_store.py: in-memory task registry enforcing non-overlapping intervals
"""
