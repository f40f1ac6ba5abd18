"""
qaapp — a small question-and-answer site.

Server-rendered pages (FastAPI + Jinja2) over a SQLite store of users,
questions, answers, tags and badges (SQLAlchemy). Run with ``qaapp`` or
``python -m qaapp.main``.
"""
