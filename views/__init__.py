# views/__init__.py
