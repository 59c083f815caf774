"""
Persistence adapters.

These modules encapsulate how feedback is stored/retrieved (today a JSON file).
Services depend on the store object rather than touching the file directly.
"""
