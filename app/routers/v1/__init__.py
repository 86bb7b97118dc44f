"""v1 router package — endpoint definitions, all mounted under /api.

Files:
  authors.py  — /api/authors
  posts.py    — /api/posts, /api/posts/author/{author_id}
  auth.py     — /api/auth/register, /login, /me
  deps.py     — bearer-token and admin dependencies

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
