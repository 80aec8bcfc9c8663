# errtrace/core/__init__.py
