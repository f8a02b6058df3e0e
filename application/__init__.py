"""
Application Layer for the Outcome Mapper API.

This package contains:
- ports/: Abstract repository interfaces (what the services need)
- services/: Application services coordinating repositories
- exceptions.py: Not-found and contract violation errors
"""
