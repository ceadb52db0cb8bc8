"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft, Priority, Category, FilterMode, View)
- task_store.py: in-memory store + mutation helpers
- task_selector.py: search / filter / due-date sort (pure)
- task_analytics.py: aggregate counts and groupings (pure)
- task_api.py: parsing helpers and demo data used by the console
"""
