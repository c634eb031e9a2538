"""
Application Layer for the Schedule API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Orchestration of the scheduling algorithms and persistence
- exceptions: Errors shared with the infrastructure layer
"""
