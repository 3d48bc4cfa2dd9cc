"""
Application Layer for the workout log.

This package contains:
- ports/: Abstract interfaces (the key-value backend and the workout store)
- use_cases/: Save, get/list and delete workflows over those ports
- exceptions: Store failures shared with the infrastructure layer
"""
