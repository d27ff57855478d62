"""
File: src/symptom_checker/infrastructure/__init__.py
Adapters for external services: the hosted model and the SQL store.
"""
