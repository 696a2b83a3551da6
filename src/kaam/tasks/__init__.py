"""
Task subsystem.

Components:
- task_models.py: data structures (Entry, RawFilter) and error types
- codec.py: storage / display / raw line encodings of an Entry
- task_store.py: file-backed storage, position-addressed rewrites
- backup.py: single-slot backup used by reset / restore
"""
