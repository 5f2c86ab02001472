# mathanim/animation/__init__.py
