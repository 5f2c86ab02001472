# mathanim/scene/__init__.py
