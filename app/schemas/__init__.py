"""Pydantic schemas package.

Folder intent:
  common.py  — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  author.py  — author DTOs and the summary embedded in posts
  post.py    — post DTOs
  auth.py    — register / login requests and token responses
"""
