# mathanim/core/__init__.py
