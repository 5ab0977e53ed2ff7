"""
htmx Todos package.

An in-memory task list served by FastAPI. Handlers answer with HTML fragments
that htmx swaps into the page.
"""
