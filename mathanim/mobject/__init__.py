# mathanim/mobject/__init__.py
